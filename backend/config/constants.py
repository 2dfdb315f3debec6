# backend/config/constants.py

# -----------------------------
# COLLECTIONS
# -----------------------------

USERS = "userx"
PRODUCTS = "products"
CATEGORIES = "categories"
OFFERS = "offers"
ORDERS = "orders"
CARTS = "carts"
SAVED = "saved"

# -----------------------------
# ROLES
# -----------------------------

ROLE_VENDOR = "VENDOR"
ROLE_EMPLOYEE = "EMPLOYEE"
ROLE_DELIVERY = "DELIVERY"
ROLE_CUSTOMER = "CUSTOMER"

# -----------------------------
# INITIAL STATUSES
# -----------------------------

ACCOUNT_ACTIVE = "ACTIVE"
PRODUCT_AVAILABLE = "AVAILABLE"
ORDER_PLACED = "PLACED"
NO_OFFER = "NA"

# -----------------------------
# LISTING
# -----------------------------

LIST_LIMIT = 50
