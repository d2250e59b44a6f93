"""
Services Module

Use cases composed from the security core and the record stores:
- AuthService: register / login / current account
- PostService: post listing, search and owner-only mutation
- CommentService: comments on posts and owner-only mutation
"""
from .auth import AuthService
from .posts import PostService
from .comments import CommentService
