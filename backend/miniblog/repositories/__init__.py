"""
Data access layer.
- base: RecordStore, the generic CRUD contract shared by every entity
- accounts / posts / comments: per-entity stores composing a RecordStore
  and adding their own queries
"""
from .base import RecordStore
from .accounts import AccountStore
from .posts import PostStore
from .comments import CommentStore
