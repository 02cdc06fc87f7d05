"""Services module"""
from food_journal.services.journal_service import JournalService

__all__ = ["JournalService"]
