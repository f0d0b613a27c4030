"""
Toast models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ToastVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
    SUCCESS = "success"


class ToastRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    variant: ToastVariant = ToastVariant.DEFAULT
    duration: Optional[float] = None
    open: bool = True
