from app.services.conversation_service import ConversationService
from app.services.customer_service import CustomerService
from app.services.message_dispatcher import MessageDispatcher
from app.services.message_service import MessageService

__all__ = [
    "ConversationService",
    "CustomerService",
    "MessageDispatcher",
    "MessageService",
]
