from datetime import date
from habitare.extensions import db
from habitare.models import Article, ArticleSection, ProductPin
from habitare.utils.transaction import transactional

SEED_ARTICLES = [
    {
        "slug": "casa-observatorio-mata-atlantica",
        "title": "Casa Observatório na Mata Atlântica",
        "subtitle": "Arquitetura biofílica com volumes suspensos e luz filtrada pela copa das árvores.",
        "category": "Edição Especial",
        "author": "Letícia Verano",
        "author_role": "Diretora Criativa da Habitare",
        "published_at": date(2024, 8, 12),
        "reading_time": 8,
        "hero_image": "https://images.unsplash.com/photo-1484154218962-a197022b5858?auto=format&fit=crop&w=1600&q=80",
        "hero_caption": "Deck principal com vista para o vale úmido da serra.",
        "excerpt": (
            "Um manifesto tropical que combina engenharia leve, materiais regenerativos "
            "e narrativas imersivas para marcas que querem habitar a floresta."
        ),
        "highlight_quote": "Projetar na mata é desenhar com o tempo e com a neblina.",
        "highlight_focus": "Biofilia operacional",
        "highlight_stat_label": "Materiais orgânicos",
        "highlight_stat_value": "82%",
        "highlight_stat_helper": "dos acabamentos utilizam madeira certificada, pedra vulcânica e fibras brasileiras.",
        "sections": [
            {
                "heading": "Estrutura leve em balanço",
                "content": (
                    "A casa pousa sobre apoios metálicos que liberam o solo para a vegetação nativa. "
                    "O pavimento social se abre em 32 metros lineares de esquadrias piso-teto."
                ),
                "media_url": "https://images.unsplash.com/photo-1470246973918-0296173bcda8?auto=format&fit=crop&w=1200&q=80",
                "media_caption": "Pórtico metálico aparente e guarda-corpo em cabo de aço inox.",
            },
            {
                "heading": "Materiais regenerativos",
                "content": (
                    "Painéis de taubilha tratada e terra estabilizada compõem o envelope sensorial, "
                    "enquanto pisos drenantes aceleram o retorno da água da chuva para o solo."
                ),
                "media_url": "https://images.unsplash.com/photo-1505693416388-ac5ce068fe85?auto=format&fit=crop&w=1200&q=80",
                "media_caption": "Forro ripado em freijó e luminárias lineares magnéticas.",
            },
        ],
        "pins": [
            {
                "slug": "poltrona-aurora",
                "name": "Poltrona Aurora",
                "description": "Base em freijó maciço, estofado em linho cru e costura aparente para lounges autorais.",
                "price_label": "R$ 4.890",
                "x_percent": 28,
                "y_percent": 62,
                "cta_path": "poltrona-aurora",
                "tracking_code": "utm_campaign=pin-biofilia&utm_medium=magazine",
                "badge": "Edição limitada",
            },
            {
                "slug": "pendente-cascata-bronze",
                "name": "Pendente Cascata Bronze",
                "description": "Camadas de vidro soprado e banho de bronze envelhecido criam um cone de luz quente.",
                "price_label": "R$ 3.270",
                "x_percent": 64,
                "y_percent": 28,
                "cta_path": "pendente-cascata",
                "tracking_code": "utm_campaign=pin-iluminacao&utm_medium=magazine",
                "badge": "Best seller",
            },
        ],
    },
    {
        "slug": "galeria-luz-brasilia",
        "title": "Galeria Luz em Brasília",
        "subtitle": "Concreto esculpido, iluminação difusa e peças colecionáveis para um circuito cultural aberto.",
        "category": "Cultural",
        "author": "Miguel Andrade",
        "author_role": "Editor de Design",
        "published_at": date(2024, 7, 22),
        "reading_time": 6,
        "hero_image": "https://images.unsplash.com/photo-1464146072230-91cabc968266?auto=format&fit=crop&w=1600&q=80",
        "hero_caption": "Galeria com sheds de concreto pigmentado e claraboias parametrizadas.",
        "excerpt": (
            "O Eixão ganha respiro com um pavilhão que mistura arte-luz, gastronomia lenta "
            "e residências artísticas conectadas com a paisagem modernista."
        ),
        "highlight_quote": "Luz é matéria tátil quando conversa com superfícies honestas.",
        "highlight_focus": "Curadoria imersiva",
        "highlight_stat_label": "Peças autorais",
        "highlight_stat_value": "47",
        "highlight_stat_helper": "designers independentes reúnem coleções cápsula dentro do circuito.",
        "sections": [
            {
                "heading": "Museografia flexível",
                "content": (
                    "Tracklights com protocolo DMX e trilhos embutidos no piso permitem cenografias "
                    "em camadas, com projeções suaves que não disputam com a arquitetura."
                ),
                "media_url": "https://images.unsplash.com/photo-1505691723518-36a5ac3be353?auto=format&fit=crop&w=1200&q=80",
                "media_caption": "Galeria principal com vedação em vidro baixo ferro.",
            },
        ],
        "pins": [],
    },
]


def load_seed_content():
    """Insert the demo articles that are not in the database yet."""
    created = 0
    with transactional():
        for seed in SEED_ARTICLES:
            if Article.find_by_slug(seed["slug"]):
                continue

            fields = {k: v for k, v in seed.items() if k not in ("sections", "pins")}
            article = Article(**fields)
            db.session.add(article)
            db.session.flush()

            for order, section in enumerate(seed["sections"], start=1):
                db.session.add(ArticleSection(article_id=article.id, sort_order=order, **section))
            for pin in seed["pins"]:
                db.session.add(ProductPin(article_id=article.id, **pin))
            created += 1
    return created
