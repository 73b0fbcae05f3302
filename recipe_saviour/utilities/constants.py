from typing import Final

DEFAULT_RECIPE_TITLE: Final[str] = "Recipe"

# Above this many recipes the planner switches from exhaustive search to greedy.
EXACT_SEARCH_LIMIT: Final[int] = 14

# --- Extraction ---
INGREDIENT_HEADINGS: Final[tuple[str, ...]] = ("ingredients",)
INSTRUCTION_HEADINGS: Final[tuple[str, ...]] = ("instructions", "method", "directions", "preparation", "steps")
HEADING_TAGS: Final[tuple[str, ...]] = ("h1", "h2", "h3", "h4", "h5", "h6")
# Tags that end a line when a section is flattened to text
LINE_BREAK_TAGS: Final[frozenset[str]] = frozenset({
    "br", "p", "div", "li", "ul", "ol", "tr", "section", "article", "table", "dd", "dt",
})

# --- Quantities ---
VULGAR_FRACTIONS: Final[dict[str, float]] = {
    "½": 0.5,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 0.25,
    "¾": 0.75,
}

# Units recognised by the quantity parser (second token of a line).
QUANTITY_UNITS: Final[frozenset[str]] = frozenset({
    "g", "kg", "gram", "grams", "mg",
    "ml", "l", "litre", "litres", "liter", "liters",
    "tbsp", "tablespoon", "tablespoons",
    "tsp", "teaspoon", "teaspoons",
    "cup", "cups",
    "oz", "ounce", "ounces",
    "lb", "lbs", "pound", "pounds",
    "pt", "pint", "pints", "qt", "quart", "quarts",
    "clove", "cloves", "slice", "slices", "can", "cans", "tin", "tins",
    "packet", "packets", "pinch", "bunch", "handful",
})

# --- Normalisation vocabularies ---
MEASUREMENT_UNITS: Final[frozenset[str]] = QUANTITY_UNITS | frozenset({
    "kilogram", "kilograms", "milligram", "milligrams",
    "millilitre", "millilitres", "milliliter", "milliliters",
    "pinches", "bunches", "handfuls", "dash", "dashes", "sprig", "sprigs",
    "stick", "sticks", "block", "blocks", "jar", "jars", "pack", "packs",
    "piece", "pieces", "bag", "bags", "box", "boxes", "pot", "pots",
    "knob", "knobs", "drizzle", "splash", "tub", "tubs", "head", "heads",
    "tbs", "tbl", "tsps", "tbsps", "fl",
})

PREPARATION_DESCRIPTORS: Final[frozenset[str]] = frozenset({
    # prep / texture
    "fresh", "freshly", "dried", "chopped", "sliced", "diced", "minced", "crushed",
    "peeled", "grated", "shredded", "cooked", "uncooked", "steamed", "boiled", "fried",
    "roasted", "baked", "beaten", "whisked", "mixed", "mashed", "ground", "halved",
    "quartered", "trimmed", "deseeded", "seeded", "cubed", "drained", "rinsed",
    "softened", "melted", "toasted", "removed", "torn", "crumbled", "julienned",
    "boneless", "skinless", "pitted", "zested", "squeezed", "sifted",
    # state / leftovers
    "cold", "warm", "hot", "leftover", "leftovers", "frozen", "thawed", "defrosted",
    "raw", "ripe", "room", "temperature", "canned", "tinned",
    # size / amount adjectives
    "large", "small", "medium", "extra", "fine", "coarse", "roughly", "finely",
    "thinly", "thickly", "lightly", "light", "dark", "heaped", "level", "generous",
    "big", "little", "whole", "good", "quality", "few", "some", "more",
    "chunky", "thick", "thin", "bite", "sized", "size",
    "virgin", "free", "range", "organic", "unsalted", "salted", "lean", "full",
    "low", "reduced", "plain", "natural",
    # time-ish
    "yesterday", "today", "tomorrow",
    # misc
    "optional", "preferably", "divided", "needed", "required", "frying",
})

STOP_WORDS: Final[frozenset[str]] = frozenset({
    "to", "taste", "of", "and", "or", "from", "for", "the", "a", "an", "about",
    "approx", "approximately", "around", "plus", "into", "with", "on", "in",
    "at", "if", "as", "each", "per", "such", "any", "your", "you", "like",
    "x",
})

# Never allowed to become a grouping key by themselves.
PURPOSE_WORDS: Final[frozenset[str]] = frozenset({
    "garnish", "garnishing", "glazing", "glaze", "serving", "serve", "dusting",
    "greasing", "decoration", "decorate", "drizzling", "sprinkling", "brushing",
    "dipping", "topping",
})

NUMBER_WORDS: Final[frozenset[str]] = frozenset({
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "half", "quarter", "third", "dozen", "couple",
})

# Too generic to stand alone as a key; the preceding qualifier is kept.
COMPOUND_TAILS: Final[frozenset[str]] = frozenset({
    "sauce", "powder", "paste", "stock", "broth", "cream", "cheese", "breast",
    "thigh", "oil", "vinegar", "seed", "flake", "juice", "zest", "leaf",
    "syrup", "sugar", "flour", "milk", "butter", "mince", "fillet", "fat",
})

# plural -> singular; reversed for pluralising display names
IRREGULAR_PLURALS: Final[dict[str, str]] = {
    "leaves": "leaf",
    "loaves": "loaf",
    "halves": "half",
    "knives": "knife",
    "olives": "olive",
    "chives": "chive",
    "cloves": "clove",
    "endives": "endive",
    "potatoes": "potato",
    "tomatoes": "tomato",
    "mangoes": "mango",
    "avocadoes": "avocado",
    "cheeses": "cheese",
    "cookies": "cookie",
    "chillies": "chilli",
    "chilies": "chili",
    "pies": "pie",
    "geese": "goose",
    "teeth": "tooth",
    "feet": "foot",
    "mice": "mouse",
}

# Words ending in "s" that are already singular.
UNCOUNTABLE_WORDS: Final[frozenset[str]] = frozenset({
    "asparagus", "couscous", "hummus", "molasses", "swiss", "citrus",
    "anise", "lettuce", "harissa", "cress", "grass", "houmous", "bass",
})
