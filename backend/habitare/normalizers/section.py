def normalize_section(section):
    return {
        "id": section.id,
        "article_id": section.article_id,
        "heading": section.heading,
        "content": section.content,
        "media_url": section.media_url,
        "media_caption": section.media_caption,
        "sort_order": section.sort_order,
        "layout_type": section.layout_type,
    }
