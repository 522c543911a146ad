from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from canchas_api import config

engine = create_engine(config.SQLALCHEMY_DATABASE_URL, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Note: models are registered by importing canchas_api.models (see init_db)
