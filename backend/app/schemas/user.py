"""
Pydantic schema for application users (teachers signing in to the platform).
"""

from typing import Optional

from pydantic import Field

from app.schemas.base import CamelModel


class User(CamelModel):
    """A platform user stored in the `users` collection."""

    id: Optional[str] = None
    mail: Optional[str] = Field(None, description="e.g. 'user_mail@utpl.edu.ec'")
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = Field(None, alias="photoURL")
