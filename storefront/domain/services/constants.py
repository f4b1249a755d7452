# Constants for the catalog discovery pipeline.

# Sort keys (values exposed to clients)
SORT_NAME_ASC = "name-ascending"
SORT_PRICE_ASC = "price-ascending"
SORT_PRICE_DESC = "price-descending"
SORT_RATING_DESC = "rating-descending"
SORT_DISCOUNT_DESC = "discount-descending"
SORT_POPULARITY_DESC = "popularity-descending"

# Values emitted by the legacy sort dropdown
SORT_ALIASES = {
    "name": SORT_NAME_ASC,
    "price-low": SORT_PRICE_ASC,
    "price-high": SORT_PRICE_DESC,
    "rating": SORT_RATING_DESC,
    "discount": SORT_DISCOUNT_DESC,
    "popularity": SORT_POPULARITY_DESC,
}

# Dropdown labels, in display order
SORT_LABELS = {
    SORT_NAME_ASC: "Sort by Name",
    SORT_PRICE_ASC: "Price: Low to High",
    SORT_PRICE_DESC: "Price: High to Low",
    SORT_RATING_DESC: "Customer Rating",
    SORT_DISCOUNT_DESC: "Highest Discount",
    SORT_POPULARITY_DESC: "Most Popular",
}

# Rating radio choices ("4★ & above" ... "All Ratings")
RATING_CHOICES = (4, 3, 2, 1, 0)
MAX_RATING = 5.0

# Recognized URL query parameter keys
URL_PARAM_SEARCH = "search"
URL_PARAM_CATEGORY = "category"
