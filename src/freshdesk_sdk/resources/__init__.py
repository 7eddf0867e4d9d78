"""Resource subpackage public API."""

from .admin import BusinessHour, EmailConfig, Product, SLAPolicy
from .base import Resource
from .discussions import Category, Comment, Forum, Topic
from .people import Agent, Company, Contact, Group
from .tickets import Conversation, Ticket, TimeEntry

__all__ = [
    "Resource",
    "Agent",
    "Company",
    "Contact",
    "Group",
    "Ticket",
    "Conversation",
    "TimeEntry",
    "Category",
    "Forum",
    "Topic",
    "Comment",
    "Product",
    "EmailConfig",
    "SLAPolicy",
    "BusinessHour",
]
