import datetime

from sqlalchemy import Column, BigInteger, Integer, String, Text, DateTime, JSON
from sqlalchemy.dialects import mysql

from database import Base

# Autoincrementing on SQLite requires a plain INTEGER primary key
PrimaryKey = BigInteger().with_variant(Integer(), "sqlite")

# Microsecond precision keeps newest-first ordering stable on MySQL
Timestamp = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


class Registrations(Base):
    __tablename__ = "registrations"

    id = Column(PrimaryKey, primary_key=True, autoincrement=True)
    name = Column(String(255))
    college = Column(String(255))
    university_id = Column(String(255))
    email = Column(String(255), index=True)
    phone = Column(String(50))
    event = Column(String(255))
    team_name = Column(String(255))
    team_members = Column(JSON)
    status = Column(String(50), nullable=False, default="Registered")
    timestamp = Column(Timestamp, nullable=False, default=utcnow)


class Users(Base):
    __tablename__ = "users"

    id = Column(PrimaryKey, primary_key=True, autoincrement=True)
    name = Column(String(255))
    college_id = Column(String(255))
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="student")
    joined_at = Column(Timestamp, nullable=False, default=utcnow)


class Messages(Base):
    __tablename__ = "messages"

    id = Column(PrimaryKey, primary_key=True, autoincrement=True)
    name = Column(String(255))
    email = Column(String(255))
    message = Column(Text)
    timestamp = Column(Timestamp, nullable=False, default=utcnow)


class Images(Base):
    __tablename__ = "images"

    id = Column(PrimaryKey, primary_key=True, autoincrement=True)
    filename = Column(String(255), nullable=False)
    url = Column(String(512), nullable=False)
    title = Column(String(255))
    category = Column(String(255))
    uploaded_at = Column(Timestamp, nullable=False, default=utcnow)
