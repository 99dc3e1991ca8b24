from sqlalchemy import Column, Integer, String, Text
from storefront.data.database import Base

class LanguageModel(Base):
    __tablename__ = "languages"
    id = Column(Integer, primary_key=True)
    code = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    native_name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
