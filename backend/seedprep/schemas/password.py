"""
Password generation schemas
"""

from pydantic import BaseModel

from seedprep.services.password_generator import PasswordOptions


class PasswordGenerateRequest(PasswordOptions):
    """Generator options, same fields as PasswordOptions"""


class PasswordGenerateResponse(BaseModel):
    password: str
    length: int
    memorable: bool
