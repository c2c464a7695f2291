from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from golf_wagers.storage.database import Base


class Settlement(Base):
    __tablename__ = "settlements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    round_id: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    result: Mapped[dict] = mapped_column(JSON, nullable=False)

    balances: Mapped[list["PlayerBalance"]] = relationship(
        back_populates="settlement", cascade="all, delete-orphan", order_by="PlayerBalance.id"
    )


class PlayerBalance(Base):
    __tablename__ = "player_balances"
    __table_args__ = (UniqueConstraint("settlement_id", "player_id", name="uq_player_balances_settlement_player"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    settlement_id: Mapped[int] = mapped_column(ForeignKey("settlements.id"), nullable=False, index=True)
    player_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    net: Mapped[float] = mapped_column(Float, nullable=False)

    settlement: Mapped[Settlement] = relationship(back_populates="balances")
