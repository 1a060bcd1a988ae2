"""データモデル"""

from .models import Fragment, Document, FragmentMapping

__all__ = ['Fragment', 'Document', 'FragmentMapping']
