"""Sign-up form with live, debounced validation."""

from .validators import PasswordStatus
from .form_model import FormViewModel

__version__ = "0.1.0"

__all__ = ["FormViewModel", "PasswordStatus", "__version__"]
