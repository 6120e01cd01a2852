def normalize_image(image):
    return {
        "id": image.id,
        "article_id": image.article_id,
        "image_url": image.image_url,
        "image_caption": image.image_caption,
        "sort_order": image.sort_order,
    }
