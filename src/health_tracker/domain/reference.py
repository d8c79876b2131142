"""Built-in reference foods used for offline estimation."""

from health_tracker.domain.nutrition import FoodReferenceEntry, MacroProfile

# Order matters: the first key found in the description wins.
REFERENCE_TABLE: tuple[FoodReferenceEntry, ...] = (
    FoodReferenceEntry(
        match_key="roasted chicken breast",
        kcal=165,
        macros=MacroProfile(protein_g=31, carbs_g=0, fat_g=3.6),
        unit_label="per 100g",
    ),
    FoodReferenceEntry(
        match_key="banana",
        kcal=105,
        macros=MacroProfile(protein_g=1.3, carbs_g=27, fat_g=0.3),
        unit_label="per medium",
    ),
    FoodReferenceEntry(
        match_key="oat milk",
        kcal=120,
        macros=MacroProfile(protein_g=3, carbs_g=16, fat_g=5),
        unit_label="per 250ml",
    ),
    FoodReferenceEntry(
        match_key="cooked rice",
        kcal=206,
        macros=MacroProfile(protein_g=4.3, carbs_g=45, fat_g=0.4),
        unit_label="per cup",
    ),
    FoodReferenceEntry(
        match_key="avocado",
        kcal=240,
        macros=MacroProfile(protein_g=3, carbs_g=12.5, fat_g=22),
        unit_label="per fruit",
    ),
    FoodReferenceEntry(
        match_key="egg",
        kcal=78,
        macros=MacroProfile(protein_g=6, carbs_g=0.6, fat_g=5),
        unit_label="per egg",
    ),
    FoodReferenceEntry(
        match_key="olive oil tbsp",
        kcal=119,
        macros=MacroProfile(protein_g=0, carbs_g=0, fat_g=13.5),
        unit_label="per tbsp",
    ),
    FoodReferenceEntry(
        match_key="protein bar",
        kcal=200,
        macros=MacroProfile(protein_g=20, carbs_g=20, fat_g=7),
        unit_label="per bar",
    ),
    FoodReferenceEntry(
        match_key="greek yogurt 0%",
        kcal=59,
        macros=MacroProfile(protein_g=10, carbs_g=3.6, fat_g=0.4),
        unit_label="per 100g",
    ),
    FoodReferenceEntry(
        match_key="pasta cooked",
        kcal=220,
        macros=MacroProfile(protein_g=8, carbs_g=43, fat_g=1.3),
        unit_label="per cup",
    ),
)

# Keyword fallbacks for descriptions missing from the table, checked in order.
KEYWORD_HEURISTICS: tuple[tuple[str, float, MacroProfile], ...] = (
    ("chicken", 250, MacroProfile(protein_g=40, carbs_g=0, fat_g=8)),
    ("beef", 300, MacroProfile(protein_g=30, carbs_g=0, fat_g=20)),
    ("salad", 180, MacroProfile(protein_g=6, carbs_g=12, fat_g=10)),
    ("sandwich", 350, MacroProfile(protein_g=15, carbs_g=40, fat_g=12)),
)

GENERIC_KCAL: float = 250
GENERIC_MACROS = MacroProfile(protein_g=8, carbs_g=30, fat_g=10)
