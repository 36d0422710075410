"""form-sync: Submission controller for client-side forms."""

__version__ = "0.1.0"

# Import after __version__ so submodules can read it without a circular import
from form_sync.form import FormSession, create_login_session

__all__ = ["__version__", "FormSession", "create_login_session"]
