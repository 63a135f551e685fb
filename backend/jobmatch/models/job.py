from sqlalchemy import Column, Integer, Text
from jobmatch.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Text, primary_key=True)
    position = Column(Integer, nullable=False)
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    url = Column(Text)
    location = Column(Text)
    keywords = Column(Text, nullable=False, default="[]")  # JSON array
    fetched_at = Column(Text, nullable=False)
