"""Text UI layer for tagxml."""

from .app import TagXmlApp
from .controller import FormController, FormSnapshot

__all__ = ["FormController", "FormSnapshot", "TagXmlApp"]
