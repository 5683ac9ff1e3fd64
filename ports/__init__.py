from .browser import ModalDriverPort
from .repos import ContactsRepoPort

__all__ = [
    "ModalDriverPort",
    "ContactsRepoPort",
]
