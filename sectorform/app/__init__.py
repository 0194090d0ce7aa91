from .factory import configure_logging, create_form_controller, create_session_store
from .form_controller import FormController

__all__ = [
    "FormController",
    "configure_logging",
    "create_form_controller",
    "create_session_store",
]
