from __future__ import annotations

import enum
import uuid
from datetime import datetime, timezone
from typing import Optional

from ean_eic_checker import db
from ean_eic_checker.checker.codes import CheckResultCode

from sqlalchemy import (
    DateTime,
    Enum,
    Index,
    String,
    Text,
)
from sqlalchemy.orm import (
    Mapped,
    mapped_column,
)

# ----------------------------
# Helpers
# ----------------------------

def utcnow() -> datetime:
    # SQLite has no real TZ; store UTC consistently.
    return datetime.now(timezone.utc)


def new_uuid() -> str:
    return str(uuid.uuid4())

# ----------------------------
# Enums
# ----------------------------

class CheckChannel(str, enum.Enum):
    json = "json"   # POST with a JSON body
    form = "form"   # POST with form data
    path = "path"   # GET /api/check/<code>


# ----------------------------
# Models
# ----------------------------

class CodeCheck(db.Model):
    """
    One classification request answered by the checker API.
    """
    __tablename__ = "code_check"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Stored exactly as supplied (may be missing or empty).
    code_raw: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    result: Mapped[CheckResultCode] = mapped_column(Enum(CheckResultCode), nullable=False, index=True)
    family: Mapped[Optional[str]] = mapped_column(String(8), nullable=True)

    channel: Mapped[CheckChannel] = mapped_column(Enum(CheckChannel), default=CheckChannel.json, nullable=False)

    # Lightweight for troubleshooting.
    client_ip: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    __table_args__ = (
        Index("ix_code_check_created_result", "created_at", "result"),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "code": self.code_raw,
            "resultCode": self.result.value,
            "family": self.family,
            "channel": self.channel.value,
        }
