""" SQLAlchemy SessionMaker """
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker

from ..config import SQLALCHEMY_CONNECTION_STRING, SQLALCHEMY_ECHO

Engine: Engine = create_engine(SQLALCHEMY_CONNECTION_STRING, echo=SQLALCHEMY_ECHO)
SessionMaker: sessionmaker = sessionmaker(bind=Engine)
