"""Kitchen restock lists submitted by cooks and reviewed by admins."""
