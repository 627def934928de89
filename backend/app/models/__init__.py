"""
Domain models module initialization.
Exports all entities for convenient imports throughout the application.

Models exported:
- User: User account including its password hash
- Post: Blog post written by a User
- UploadedFile: Metadata of a file kept in the blob store
"""
from .user import User
from .post import Post, CATEGORIES, estimate_read_time
from .file import UploadedFile
