# Collection names
PRODUCTS = "products"
REVIEWS = "reviews"
CATEGORIES = "categories"

# All collections wiped and rebuilt by the seed loader
SEEDED_COLLECTIONS = (PRODUCTS, CATEGORIES, REVIEWS)

# Number of reviews returned by the "recent reviews" route
RECENT_REVIEWS_LIMIT = 5
