"""Constants for meta tag registration."""


class META_CONSTANTS:
    """Constants for meta tag generation and model probing."""

    # Tag name prefixes
    OG_PREFIX = "og:"
    TWITTER_PREFIX = "twitter:"
    DC_PREFIX = "DC."

    # OpenGraph properties that may appear several times on a page
    UNKEYED_OG_PROPERTIES = frozenset({"og:locale:alternate"})

    # Description handling
    DEFAULT_DESCRIPTION_LENGTH = 150
    ELLIPSIS = "..."

    # Keywords are joined with a bare comma
    KEYWORD_SEPARATOR = ","

    # View parameter holding the breadcrumb trail
    BREADCRUMBS_PARAM = "breadcrumbs"

    # Handler lookup for configured tag names: "title" -> "register_title"
    HANDLER_PREFIX = "register_"

    # Convention getters probed on a model, in precedence order.
    # Names starting with "get_" are called, the others are read.
    TITLE_SOURCES = ("get_meta_title", "get_title", "title")
    DESCRIPTION_SOURCES = ("get_meta_description", "get_description", "description")
    KEYWORDS_SOURCES = ("get_meta_keywords", "get_keywords", "keywords")
    IMAGE_URL_SOURCES = (
        "get_meta_image_url",
        "get_image_url",
        "image_url",
        "get_meta_image",
        "get_image",
        "image",
    )
    IMAGE_ALT_SOURCES = ("get_meta_image_alt", "get_image_alt", "image_alt")

    # Optional up-front descriptor method on a model
    DESCRIPTOR_METHOD = "meta_descriptor"

    # Request headers used to detect partial page requests
    AJAX_HEADER = "x-requested-with"
    AJAX_HEADER_VALUE = "XMLHttpRequest"
    PJAX_HEADER = "x-pjax"
