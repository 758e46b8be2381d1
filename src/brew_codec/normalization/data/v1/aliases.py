ALIASES = [
    {"domain": "roast_level", "key": "extremely_light", "alias": "extra light", "match_type": "exact", "priority": 10},
    {"domain": "roast_level", "key": "extremely_light", "alias": "very light", "match_type": "exact", "priority": 10},
    {"domain": "roast_level", "key": "extremely_light", "alias": "ultra light", "match_type": "exact", "priority": 10},
    {"domain": "roast_level", "key": "extremely_light", "alias": "极浅", "match_type": "exact", "priority": 10},
    {"domain": "roast_level", "key": "light", "alias": "cinnamon", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "light", "alias": "nordic", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "light", "alias": "blonde", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "light", "alias": "浅烘", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "medium_light", "alias": "american", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "medium_light", "alias": "中浅", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "medium", "alias": "city", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "medium", "alias": "city+", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "medium", "alias": "中烘", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "medium_dark", "alias": "full city", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "medium_dark", "alias": "中深", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "dark", "alias": "vienna", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "dark", "alias": "french", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "dark", "alias": "italian", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "dark", "alias": "深烘", "match_type": "exact", "priority": 20},
    {"domain": "roast_level", "key": "extremely_light", "alias": r"(extra|very|ultra)[\s_-]*light", "match_type": "regex", "priority": 10},
    {"domain": "roast_level", "key": "medium_light", "alias": r"(light[\s_-]*medium|medium[\s_-]*light)", "match_type": "regex", "priority": 20},
    {"domain": "roast_level", "key": "medium_dark", "alias": r"(dark[\s_-]*medium|medium[\s_-]*dark)", "match_type": "regex", "priority": 20},
    {"domain": "roast_level", "key": "dark", "alias": "dark", "match_type": "contains", "priority": 30},
    {"domain": "roast_level", "key": "light", "alias": "light", "match_type": "contains", "priority": 30},
    {"domain": "roast_level", "key": "medium", "alias": "medium", "match_type": "contains", "priority": 40},
    {"domain": "bean_type", "key": "filter", "alias": "pour over", "match_type": "exact", "priority": 10},
    {"domain": "bean_type", "key": "filter", "alias": "hand drip", "match_type": "exact", "priority": 10},
    {"domain": "bean_type", "key": "filter", "alias": "drip", "match_type": "exact", "priority": 10},
    {"domain": "bean_type", "key": "omni", "alias": "both", "match_type": "exact", "priority": 10},
    {"domain": "bean_type", "key": "omni", "alias": "omni roast", "match_type": "exact", "priority": 10},
    {"domain": "bean_type", "key": "filter", "alias": "filter", "match_type": "contains", "priority": 20},
    {"domain": "bean_type", "key": "espresso", "alias": "espresso", "match_type": "contains", "priority": 20},
]
