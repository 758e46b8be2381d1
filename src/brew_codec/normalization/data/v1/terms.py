TERMS = [
    {"domain": "roast_level", "key": "extremely_light", "label_en": "extremely light roast", "label_zh": "极浅烘焙"},
    {"domain": "roast_level", "key": "light", "label_en": "light roast", "label_zh": "浅度烘焙"},
    {"domain": "roast_level", "key": "medium_light", "label_en": "medium-light roast", "label_zh": "中浅烘焙"},
    {"domain": "roast_level", "key": "medium", "label_en": "medium roast", "label_zh": "中度烘焙"},
    {"domain": "roast_level", "key": "medium_dark", "label_en": "medium-dark roast", "label_zh": "中深烘焙"},
    {"domain": "roast_level", "key": "dark", "label_en": "dark roast", "label_zh": "深度烘焙"},
    {"domain": "bean_type", "key": "filter", "label_en": "Filter", "label_zh": "手冲"},
    {"domain": "bean_type", "key": "espresso", "label_en": "Espresso", "label_zh": "意式"},
    {"domain": "bean_type", "key": "omni", "label_en": "Omni", "label_zh": "全能"},
]
