"""Remote-to-local state propagation."""

from form_sync.sync.synchronizer import Synchronizer

__all__ = ["Synchronizer"]
