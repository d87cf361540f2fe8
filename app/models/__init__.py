from app.models.conversation import Conversation
from app.models.customer import Customer
from app.models.message import Message
from app.models.staff import Staff
from app.models.staff_conversation import StaffConversation

__all__ = [
    "Conversation",
    "Customer",
    "Message",
    "Staff",
    "StaffConversation",
]
