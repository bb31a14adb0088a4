"""Built-in Hinglish lexicon of common Indian foods, units and cooking methods."""

from functools import cache

from nutrisync.services.lexicon import Lexicon

DEFAULT_LEXICON_PAYLOAD: dict[str, object] = {
    "version": "2024.1",
    "locale": "hi-Latn",
    "concepts": [
        # Grains and rice dishes
        {
            "name": "rice",
            "kind": "food",
            "aliases": ["chawal", "chaawal", "chaval", "bhaat", "rice", "sada chawal"],
            "pairs_with": [
                "lentils",
                "kidney beans",
                "chickpea curry",
                "curry",
                "sambar",
                "yogurt",
            ],
            "grams": 150,
        },
        {
            "name": "jeera rice",
            "kind": "food",
            "aliases": ["jeera rice", "jeera chawal", "cumin rice"],
            "grams": 150,
        },
        {
            "name": "biryani",
            "kind": "food",
            "aliases": ["biryani", "biriyani", "biryaani"],
            "pairs_with": ["raita"],
            "grams": 250,
        },
        {
            "name": "pulao",
            "kind": "food",
            "aliases": ["pulao", "pulav", "pilaf"],
            "pairs_with": ["raita"],
            "grams": 200,
        },
        {
            "name": "khichdi",
            "kind": "food",
            "aliases": ["khichdi", "khichri", "khichadi"],
            "pairs_with": ["yogurt"],
            "grams": 200,
        },
        {"name": "poha", "kind": "food", "aliases": ["poha"], "grams": 150},
        {"name": "upma", "kind": "food", "aliases": ["upma"], "grams": 150},
        # Pulses
        {
            "name": "lentils",
            "kind": "food",
            "aliases": ["dal", "daal", "dhal", "lentils", "lentil"],
            "variants": ["moong dal", "toor dal", "masoor dal", "chana dal", "urad dal"],
            "pairs_with": ["rice", "jeera rice", "bread", "flatbread"],
            "grams": 150,
        },
        {
            "name": "moong dal",
            "kind": "food",
            "aliases": ["moong dal", "moong daal", "mung dal"],
            "grams": 150,
        },
        {
            "name": "toor dal",
            "kind": "food",
            "aliases": ["toor dal", "toor daal", "arhar dal", "arhar", "tuvar dal"],
            "grams": 150,
        },
        {
            "name": "masoor dal",
            "kind": "food",
            "aliases": ["masoor dal", "masoor daal", "masoor"],
            "grams": 150,
        },
        {
            "name": "chana dal",
            "kind": "food",
            "aliases": ["chana dal", "chana daal"],
            "grams": 150,
        },
        {
            "name": "urad dal",
            "kind": "food",
            "aliases": ["urad dal", "urad daal", "urad"],
            "grams": 150,
        },
        {
            "name": "dal makhani",
            "kind": "food",
            "aliases": ["dal makhani", "daal makhani"],
            "pairs_with": ["rice", "leavened bread"],
            "grams": 150,
        },
        {
            "name": "mung beans",
            "kind": "food",
            "aliases": ["moong", "mung", "mung beans", "sprouts"],
            "grams": 100,
        },
        {
            "name": "chickpeas",
            "kind": "food",
            "aliases": ["chana", "kabuli chana", "chickpeas"],
            "grams": 100,
        },
        {
            "name": "chickpea curry",
            "kind": "food",
            "aliases": ["chole", "chhole", "chana masala"],
            "pairs_with": ["fried leavened bread", "rice", "puri"],
            "grams": 150,
        },
        {
            "name": "kidney beans",
            "kind": "food",
            "aliases": ["rajma", "rajma masala", "kidney beans"],
            "pairs_with": ["rice"],
            "grams": 150,
        },
        {
            "name": "sambar",
            "kind": "food",
            "aliases": ["sambar", "sambhar"],
            "pairs_with": ["rice", "idli", "dosa"],
            "grams": 150,
        },
        # Vegetable dishes
        {
            "name": "vegetable",
            "kind": "food",
            "aliases": ["sabzi", "sabji", "subzi", "sabzee", "vegetable", "vegetables"],
            "variants": [
                "potato curry",
                "spinach curry",
                "cauliflower curry",
                "okra curry",
            ],
            "pairs_with": ["bread", "flatbread", "stuffed flatbread", "rice"],
            "grams": 150,
        },
        {
            "name": "potato curry",
            "kind": "food",
            "aliases": ["aloo sabzi", "aloo ki sabzi", "aloo sabji", "aloo curry"],
            "grams": 150,
        },
        {
            "name": "spinach curry",
            "kind": "food",
            "aliases": ["palak sabzi", "palak ki sabzi", "palak sabji"],
            "grams": 150,
        },
        {
            "name": "cauliflower curry",
            "kind": "food",
            "aliases": ["gobi sabzi", "gobi ki sabzi", "gobhi sabzi", "aloo gobi"],
            "grams": 150,
        },
        {
            "name": "okra curry",
            "kind": "food",
            "aliases": ["bhindi sabzi", "bhindi ki sabzi", "bhindi masala"],
            "grams": 150,
        },
        {
            "name": "palak paneer",
            "kind": "food",
            "aliases": ["palak paneer"],
            "pairs_with": ["bread", "flatbread", "leavened bread", "rice"],
            "grams": 150,
        },
        {
            "name": "paneer makhani",
            "kind": "food",
            "aliases": ["paneer makhani", "paneer butter masala", "shahi paneer"],
            "pairs_with": ["leavened bread", "bread"],
            "grams": 150,
        },
        {
            "name": "matar paneer",
            "kind": "food",
            "aliases": ["matar paneer", "mattar paneer"],
            "grams": 150,
        },
        {"name": "dum aloo", "kind": "food", "aliases": ["dum aloo"], "grams": 150},
        # Curries and meat
        {
            "name": "curry",
            "kind": "food",
            "aliases": ["curry"],
            "variants": ["chicken curry", "mutton curry", "fish curry", "egg curry"],
            "pairs_with": ["rice", "bread", "leavened bread"],
            "grams": 200,
        },
        {
            "name": "chicken curry",
            "kind": "food",
            "aliases": ["chicken curry", "murgh curry"],
            "grams": 200,
        },
        {
            "name": "mutton curry",
            "kind": "food",
            "aliases": ["mutton curry", "gosht curry"],
            "grams": 200,
        },
        {
            "name": "fish curry",
            "kind": "food",
            "aliases": ["fish curry", "machli curry", "machhli curry"],
            "grams": 200,
        },
        {
            "name": "egg curry",
            "kind": "food",
            "aliases": ["egg curry", "anda curry"],
            "grams": 200,
        },
        {
            "name": "butter chicken",
            "kind": "food",
            "aliases": ["butter chicken", "murgh makhani"],
            "pairs_with": ["leavened bread", "rice"],
            "grams": 200,
        },
        {
            "name": "chicken",
            "kind": "food",
            "aliases": ["chicken", "murgh", "murga"],
            "grams": 100,
        },
        {"name": "mutton", "kind": "food", "aliases": ["mutton", "gosht"], "grams": 100},
        {
            "name": "fish",
            "kind": "food",
            "aliases": ["fish", "machli", "machhli", "macchi"],
            "grams": 100,
        },
        {
            "name": "egg",
            "kind": "food",
            "aliases": ["anda", "ande", "egg", "eggs", "omelette", "omelet"],
            "grams": 50,
        },
        # Breads
        {
            "name": "bread",
            "kind": "food",
            "aliases": ["roti", "rotis", "phulka", "bread"],
            "pairs_with": [
                "lentils",
                "vegetable",
                "curry",
                "kidney beans",
                "chickpea curry",
            ],
            "grams": 30,
        },
        {
            "name": "flatbread",
            "kind": "food",
            "aliases": ["chapati", "chapatti", "chapathi", "chapatis"],
            "pairs_with": ["lentils", "vegetable"],
            "grams": 35,
        },
        {
            "name": "stuffed flatbread",
            "kind": "food",
            "aliases": ["paratha", "parantha", "prantha", "parathas"],
            "variants": [
                "aloo paratha",
                "gobi paratha",
                "paneer paratha",
                "plain paratha",
            ],
            "pairs_with": ["yogurt", "butter"],
            "grams": 80,
        },
        {
            "name": "aloo paratha",
            "kind": "food",
            "aliases": ["aloo paratha", "aloo parantha", "alu paratha"],
            "grams": 100,
        },
        {
            "name": "gobi paratha",
            "kind": "food",
            "aliases": ["gobi paratha", "gobhi paratha"],
            "grams": 100,
        },
        {
            "name": "paneer paratha",
            "kind": "food",
            "aliases": ["paneer paratha"],
            "grams": 100,
        },
        {
            "name": "plain paratha",
            "kind": "food",
            "aliases": ["plain paratha", "sada paratha", "lachha paratha"],
            "grams": 60,
        },
        {
            "name": "leavened bread",
            "kind": "food",
            "aliases": ["naan", "butter naan", "garlic naan"],
            "grams": 90,
        },
        {
            "name": "fried leavened bread",
            "kind": "food",
            "aliases": ["bhatura", "bhature"],
            "pairs_with": ["chickpea curry"],
            "grams": 80,
        },
        {
            "name": "puri",
            "kind": "food",
            "aliases": ["puri", "poori", "puris"],
            "pairs_with": ["potato curry", "chickpea curry"],
            "grams": 25,
        },
        # South Indian
        {
            "name": "idli",
            "kind": "food",
            "aliases": ["idli", "idly"],
            "pairs_with": ["sambar", "coconut chutney"],
            "grams": 40,
        },
        {
            "name": "dosa",
            "kind": "food",
            "aliases": ["dosa", "dosai", "masala dosa"],
            "pairs_with": ["sambar", "coconut chutney"],
            "grams": 120,
        },
        {
            "name": "coconut chutney",
            "kind": "food",
            "aliases": ["nariyal chutney", "coconut chutney", "chutney"],
            "grams": 30,
        },
        # Dairy
        {
            "name": "yogurt",
            "kind": "food",
            "aliases": ["dahi", "curd", "yogurt", "yoghurt"],
            "grams": 100,
        },
        {
            "name": "raita",
            "kind": "food",
            "aliases": ["raita", "boondi raita"],
            "grams": 100,
        },
        {
            "name": "buttermilk",
            "kind": "food",
            "aliases": ["chaas", "chhach", "chaach", "mattha", "buttermilk"],
            "grams": 250,
        },
        {"name": "lassi", "kind": "food", "aliases": ["lassi"], "grams": 250},
        {"name": "cottage cheese", "kind": "food", "aliases": ["paneer"], "grams": 100},
        {
            "name": "clarified butter",
            "kind": "food",
            "aliases": ["ghee", "desi ghee"],
            "grams": 5,
        },
        {
            "name": "butter",
            "kind": "food",
            "aliases": ["makhan", "makkhan", "butter"],
            "grams": 10,
        },
        {"name": "milk", "kind": "food", "aliases": ["doodh", "dudh", "milk"], "grams": 250},
        # Drinks
        {
            "name": "tea",
            "kind": "food",
            "aliases": ["chai", "tea"],
            "variants": ["masala chai", "milk tea", "black tea", "green tea"],
            "grams": 150,
        },
        {
            "name": "masala chai",
            "kind": "food",
            "aliases": ["masala chai", "masala tea", "adrak chai", "adrak wali chai"],
            "grams": 150,
        },
        {
            "name": "milk tea",
            "kind": "food",
            "aliases": ["doodh wali chai", "doodh chai", "milk tea"],
            "grams": 150,
        },
        {
            "name": "black tea",
            "kind": "food",
            "aliases": ["black tea", "kali chai", "kaali chai"],
            "grams": 150,
        },
        {"name": "green tea", "kind": "food", "aliases": ["green tea"], "grams": 150},
        {
            "name": "coffee",
            "kind": "food",
            "aliases": ["coffee", "filter coffee"],
            "grams": 150,
        },
        {"name": "water", "kind": "food", "aliases": ["paani", "pani", "water"], "grams": 250},
        # Vegetables
        {
            "name": "potato",
            "kind": "food",
            "aliases": ["aloo", "alu", "potato", "potatoes"],
            "grams": 100,
        },
        {
            "name": "tomato",
            "kind": "food",
            "aliases": ["tamatar", "tomato", "tomatoes"],
            "grams": 80,
        },
        {
            "name": "onion",
            "kind": "food",
            "aliases": ["pyaaz", "pyaz", "kanda", "onion"],
            "grams": 50,
        },
        {"name": "spinach", "kind": "food", "aliases": ["palak", "spinach"], "grams": 100},
        {
            "name": "cauliflower",
            "kind": "food",
            "aliases": ["phool gobi", "gobi", "gobhi", "cauliflower"],
            "grams": 100,
        },
        {
            "name": "cabbage",
            "kind": "food",
            "aliases": ["patta gobi", "band gobi", "bandh gobi", "cabbage", "gobi"],
            "grams": 100,
        },
        {
            "name": "okra",
            "kind": "food",
            "aliases": ["bhindi", "okra", "lady finger"],
            "grams": 100,
        },
        {
            "name": "bitter gourd",
            "kind": "food",
            "aliases": ["karela", "bitter gourd"],
            "grams": 100,
        },
        {
            "name": "bottle gourd",
            "kind": "food",
            "aliases": ["lauki", "ghiya", "doodhi", "bottle gourd"],
            "grams": 100,
        },
        {
            "name": "eggplant",
            "kind": "food",
            "aliases": ["baingan", "brinjal", "eggplant"],
            "grams": 100,
        },
        {
            "name": "bell pepper",
            "kind": "food",
            "aliases": ["shimla mirch", "capsicum", "bell pepper"],
            "grams": 80,
        },
        {
            "name": "chili",
            "kind": "food",
            "aliases": ["mirch", "hari mirch", "chili", "chilli"],
            "grams": 5,
        },
        {"name": "carrot", "kind": "food", "aliases": ["gajar", "carrot"], "grams": 60},
        {"name": "peas", "kind": "food", "aliases": ["matar", "mattar", "peas"], "grams": 80},
        {"name": "fenugreek", "kind": "food", "aliases": ["methi"], "grams": 50},
        # Fruit
        {"name": "banana", "kind": "food", "aliases": ["kela", "banana"], "grams": 120},
        {"name": "apple", "kind": "food", "aliases": ["seb", "apple"], "grams": 150},
        {"name": "mango", "kind": "food", "aliases": ["aam", "mango"], "grams": 200},
        # Pantry
        {
            "name": "sugar",
            "kind": "food",
            "aliases": ["cheeni", "chini", "shakkar", "sugar"],
            "grams": 5,
        },
        {"name": "salt", "kind": "food", "aliases": ["namak", "salt"], "grams": 1},
        {
            "name": "wheat flour",
            "kind": "food",
            "aliases": ["atta", "wheat flour"],
            "grams": 30,
        },
        {
            "name": "gram flour",
            "kind": "food",
            "aliases": ["besan", "gram flour"],
            "grams": 30,
        },
        # Snacks and sweets
        {"name": "samosa", "kind": "food", "aliases": ["samosa", "samose"], "grams": 60},
        {
            "name": "pakora",
            "kind": "food",
            "aliases": ["pakora", "pakode", "pakoda", "bhajiya"],
            "grams": 50,
        },
        {"name": "dhokla", "kind": "food", "aliases": ["dhokla"], "grams": 60},
        {"name": "kheer", "kind": "food", "aliases": ["kheer"], "grams": 150},
        {
            "name": "halwa",
            "kind": "food",
            "aliases": ["halwa", "sooji halwa", "gajar halwa"],
            "grams": 100,
        },
        {"name": "gulab jamun", "kind": "food", "aliases": ["gulab jamun"], "grams": 40},
        {"name": "salad", "kind": "food", "aliases": ["salad"], "grams": 100},
        # Household units
        {
            "name": "katori",
            "kind": "unit",
            "aliases": ["katori", "katoris", "kathori", "bowl", "bowls"],
            "grams": 150,
        },
        {
            "name": "glass",
            "kind": "unit",
            "aliases": ["glass", "glasses", "gilas"],
            "grams": 250,
        },
        {
            "name": "spoon",
            "kind": "unit",
            "aliases": ["spoon", "spoons", "chammach", "chamach", "tablespoon", "tbsp"],
            "grams": 15,
        },
        {
            "name": "teaspoon",
            "kind": "unit",
            "aliases": ["teaspoon", "tsp", "chhota chammach"],
            "grams": 5,
        },
        {"name": "cup", "kind": "unit", "aliases": ["cup", "cups", "pyala"], "grams": 200},
        {
            "name": "plate",
            "kind": "unit",
            "aliases": ["plate", "plates", "thali"],
            "grams": 300,
        },
        {"name": "handful", "kind": "unit", "aliases": ["handful", "mutthi"], "grams": 50},
        {"name": "pinch", "kind": "unit", "aliases": ["pinch", "chutki"], "grams": 1},
        {
            "name": "piece",
            "kind": "unit",
            "aliases": ["piece", "pieces", "pc", "pcs", "nag", "tukda", "tukde"],
        },
        {"name": "slice", "kind": "unit", "aliases": ["slice", "slices"]},
        {"name": "portion", "kind": "unit", "aliases": ["portion", "serving", "servings"]},
        {
            "name": "gram",
            "kind": "unit",
            "aliases": ["gram", "grams", "g", "gm", "gms"],
            "grams": 1,
        },
        {"name": "kilogram", "kind": "unit", "aliases": ["kg", "kilo"], "grams": 1000},
        {"name": "milliliter", "kind": "unit", "aliases": ["ml"], "grams": 1},
        {
            "name": "liter",
            "kind": "unit",
            "aliases": ["liter", "litre", "ltr"],
            "grams": 1000,
        },
        # Cooking methods
        {
            "name": "tadka",
            "kind": "cooking_method",
            "aliases": ["tadka", "tarka", "chaunk", "baghar", "tempered"],
            "nutrition_multiplier": 1.1,
        },
        {
            "name": "bhuna",
            "kind": "cooking_method",
            "aliases": ["bhuna", "bhuni", "bhuno", "dry roast"],
            "nutrition_multiplier": 1.0,
        },
        {
            "name": "dum",
            "kind": "cooking_method",
            "aliases": ["dum", "slow cooked"],
            "nutrition_multiplier": 1.2,
        },
        {
            "name": "tawa",
            "kind": "cooking_method",
            "aliases": ["tawa", "tava", "griddle"],
            "nutrition_multiplier": 1.0,
        },
        {
            "name": "tandoor",
            "kind": "cooking_method",
            "aliases": ["tandoor", "tandoori", "clay oven"],
            "nutrition_multiplier": 0.9,
        },
        {
            "name": "steamed",
            "kind": "cooking_method",
            "aliases": ["steamed", "steam", "bhaap"],
            "nutrition_multiplier": 0.8,
        },
        {
            "name": "fried",
            "kind": "cooking_method",
            "aliases": ["fried", "deep fried", "tala", "tali", "tala hua", "fry"],
            "nutrition_multiplier": 1.5,
        },
        {
            "name": "boiled",
            "kind": "cooking_method",
            "aliases": ["boiled", "ubla", "ubli", "ubla hua"],
            "nutrition_multiplier": 0.9,
        },
        {
            "name": "roasted",
            "kind": "cooking_method",
            "aliases": ["roasted", "grilled", "baked", "seka", "seki"],
            "nutrition_multiplier": 0.9,
        },
    ],
    "number_words": {
        "ek": 1,
        "do": 2,
        "teen": 3,
        "char": 4,
        "chaar": 4,
        "paanch": 5,
        "panch": 5,
        "chhe": 6,
        "saat": 7,
        "aath": 8,
        "nau": 9,
        "das": 10,
        "dedh": 1.5,
        "dhai": 2.5,
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
        "ten": 10,
    },
    "portion_words": {
        "thoda": 0.5,
        "thodi": 0.5,
        "thode": 0.5,
        "little": 0.5,
        "aadha": 0.5,
        "adha": 0.5,
        "aadhi": 0.5,
        "half": 0.5,
        "zyada": 2.0,
        "jyada": 2.0,
        "zyaada": 2.0,
        "bahut": 2.0,
        "kam": 0.3,
        "poora": 1.0,
        "pura": 1.0,
        "full": 1.0,
    },
    # Everyday words that are never matched to a food by spelling
    "stop_words": [
        "maine",
        "mene",
        "humne",
        "mujhe",
        "mera",
        "meri",
        "khaya",
        "khayi",
        "khaye",
        "khana",
        "khane",
        "banaya",
        "banayi",
        "banaye",
        "piya",
        "piyi",
        "liya",
        "liye",
        "bola",
        "boli",
        "kaha",
        "kehta",
        "aur",
        "hai",
        "hain",
        "tha",
        "thi",
        "mein",
        "bhi",
        "kya",
        "kitna",
        "kitni",
        "accha",
        "achha",
        "healthy",
        "sehatmand",
        "aaj",
        "kal",
        "subah",
        "shaam",
        "raat",
        "nashta",
        "bhai",
        "bhaiya",
        "bhaiyya",
        "didi",
        "mummy",
        "papa",
        "dost",
        "patient",
        "with",
        "and",
        "had",
        "ate",
        "drank",
        "made",
        "cooked",
    ],
}


@cache
def default_lexicon() -> Lexicon:
    """Return the shared built-in lexicon."""
    return Lexicon.from_payload(DEFAULT_LEXICON_PAYLOAD)
