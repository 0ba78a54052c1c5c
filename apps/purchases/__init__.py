"""
Purchases App - Shopping Expense Tracking

This app manages the daily shopping list: every priced expense line the
restaurant buys, tied to a purchase date.

Key Features:
- Daily shopping list with completion tracking
- Inline rename / reprice of items
- Purchase history grouped by date
- Bulk materialization of approved kitchen lists into shopping items

Architecture:
- Models: PurchaseItem
- Services: ShoppingListService
- Views: RESTful API with ViewSets
- Exceptions: Domain exception hierarchy
"""
