"""Auth-mapping model — maps to the 'garage_auth' table."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from garage_api.infrastructure.database import Base


class GarageAuth(Base):
    __tablename__ = "garage_auth"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_uid = Column(String(36), ForeignKey("users.user_uid"), nullable=False, unique=True, index=True)
    garage_uid = Column(String(64), nullable=True)
    garage_id = Column(String(64), nullable=True)
    garage_name = Column(String(255), nullable=False, default="")
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    login_id = Column(String, nullable=False, index=True)
    user_role = Column(String, nullable=False)
    password_hash = Column(String(255), nullable=True)  # set by the employee later
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<GarageAuth {self.login_id}>"
