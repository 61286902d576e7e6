from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class EmailAccount(Base):
    __tablename__ = "contas_email"

    id = Column(Integer, primary_key=True, autoincrement=True)
    conta = Column(String(255), nullable=False)  # Email address / login
    empresa_id = Column(Integer, nullable=False)  # Owning company, not checked
    crd_id = Column(String(255), nullable=True)  # Linked credential record, if any
    tipo_conta = Column(String(100), nullable=False)
