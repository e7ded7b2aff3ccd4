"""Data access for users and payments. Functions take an open Session."""
