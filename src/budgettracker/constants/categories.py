"""
Default categories created for every new user.
Slugs double as the category value stored on transactions and budgets.
"""

# (slug, name, icon)
EXPENSE_CATEGORIES = [
    ("groceries", "Groceries", "shopping-bag"),
    ("shopping", "Shopping", "shopping-cart"),
    ("dining", "Dining", "coffee"),
    ("transportation", "Transportation", "car"),
    ("home", "Home", "home"),
    ("entertainment", "Entertainment", "film"),
    ("bills", "Bills & Utilities", "file-text"),
    ("health", "Health", "activity"),
    ("education", "Education", "book"),
    ("other", "Other", "more-horizontal"),
]

INCOME_CATEGORIES = [
    ("salary", "Salary", "briefcase"),
    ("freelance", "Freelance", "edit-3"),
    ("investments", "Investments", "trending-up"),
    ("gifts", "Gifts", "gift"),
    ("refunds", "Refunds", "corner-up-left"),
    ("other", "Other", "more-horizontal"),
]

TRANSACTION_TYPES = ["income", "expense"]

ACCOUNT_TYPES = ["checking", "savings", "credit", "cash", "investment"]
