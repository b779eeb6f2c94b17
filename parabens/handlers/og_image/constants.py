# Log event codes of the og_image handler
OG_IMAGE_CACHE_HIT = 'OG_IMAGE_CACHE_HIT'
OG_IMAGE_RENDERED = 'OG_IMAGE_RENDERED'
OG_IMAGE_RENDER_FAILED = 'OG_IMAGE_RENDER_FAILED'
OG_IMAGE_DEFAULT = 'OG_IMAGE_DEFAULT'
