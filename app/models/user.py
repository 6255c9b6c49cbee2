"""ORM model for user accounts."""

from sqlalchemy import Column, Integer, String, UniqueConstraint

from app.models.base import Base

# Maximum length of login, phone and pass.
FIELD_MAX_LEN = 8
# Largest id the INTEGER primary key can hold.
ID_MAX = 2**31 - 1


class User(Base):
    """
    User account row. The (login, pass) pair is unique across the table.

    The column is named "pass"; it is mapped onto the `password` attribute.
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("login", "pass", name="uniq_login_pass"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    login = Column(String(FIELD_MAX_LEN), nullable=False)
    phone = Column(String(FIELD_MAX_LEN), nullable=False)
    password = Column("pass", String(FIELD_MAX_LEN), nullable=False)
