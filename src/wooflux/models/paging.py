"""Paging defaults shared by list endpoints and synchronize actions."""

FIRST_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 25

__all__ = ["DEFAULT_PAGE_SIZE", "FIRST_PAGE_NUMBER"]
