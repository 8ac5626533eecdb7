# torqueup/nlp/keywords.py

# Makes we recognise in the conversation. Order is priority: the first
# one mentioned (and in stock) wins.
CAR_BRANDS = (
    "volkswagen", "toyota", "honda", "bmw", "mercedes", "audi", "ford", "chevrolet",
    "nissan", "hyundai", "kia", "mazda", "subaru", "lexus", "infiniti", "acura",
    "volvo", "jaguar", "land rover", "porsche", "ferrari", "lamborghini", "bentley",
    "rolls royce", "maserati", "alfa romeo", "fiat", "jeep", "dodge", "chrysler",
    "cadillac", "lincoln", "buick", "gmc", "ram", "tesla", "peugeot", "citroen",
    "renault", "dacia", "skoda", "seat",
)

# Budget answers (DA tiers from the questionnaire in the prompt)
BUDGET_LOW = ("under 1,000,000", "budget a", "cheap")
BUDGET_MID = ("1,000,000", "2,000,000")      # both must appear
BUDGET_UPPER = ("2,000,000", "3,000,000")    # both must appear
BUDGET_HIGH = ("above 3,000,000", "expensive", "luxury")

# Main use of the car
USAGE_CITY = ("city", "commut")
USAGE_FAMILY = ("family", "trip")
USAGE_ADVENTURE = ("adventure", "off-road")
USAGE_BUSINESS = ("business", "professional")

# Size preference
SIZE_COMPACT = ("compact",)
SIZE_LARGE = ("large", "suv")
