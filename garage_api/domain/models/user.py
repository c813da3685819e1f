"""User domain model — maps to the 'users' table."""

import uuid

from sqlalchemy import Column, String, Boolean, DateTime

from garage_api.infrastructure.database import Base


def new_user_uid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    user_uid = Column(String(36), primary_key=True, default=new_user_uid)

    # Tenant, copied from the garage owner
    garage_uid = Column(String(64), nullable=True, index=True)
    garage_id = Column(String(64), nullable=True, index=True)
    garage_name = Column(String(255), nullable=False, default="")

    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    employee_id = Column(String(64), nullable=True)
    login_id = Column(String, nullable=False, unique=True, index=True)
    user_role = Column(String, nullable=False)
    email = Column(String(254), nullable=False)
    phone_number = Column(String(32), nullable=False)

    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<User {self.login_id}>"
