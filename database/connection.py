from config import DB_CONFIG, DATABASE_URL, DB_POOL_SIZE, DB_POOL_RECYCLE
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from urllib.parse import quote_plus
from models import Base  # triggers imports of all tables
from utils.logger import logger


def build_database_url() -> str:
    """Build the SQLAlchemy URL for MySQL (PyMySQL driver) from DB_CONFIG."""
    password = quote_plus(DB_CONFIG['password'] or '')
    return (
        f"mysql+pymysql://{DB_CONFIG['user']}:{password}"
        f"@{DB_CONFIG['host']}:{DB_CONFIG['port']}/{DB_CONFIG['database']}"
        f"?charset={DB_CONFIG['charset']}"
    )


def create_db_engine(db_url: str):
    if db_url.startswith("sqlite"):
        return create_engine(db_url, echo=False)

    connect_args = {}
    if DB_CONFIG['ssl']:
        # PyMySQL takes SSL options via connect_args; managed MySQL hosts
        # present certificates we cannot verify by hostname
        connect_args["ssl"] = {"check_hostname": False}

    return create_engine(
        db_url,
        echo=False,
        pool_size=DB_POOL_SIZE,
        pool_recycle=DB_POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


engine = create_db_engine(DATABASE_URL or build_database_url())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create the call_history and contacts tables if they do not exist."""
    Base.metadata.create_all(bind=engine)


def check_connection() -> bool:
    """Run SELECT 1 against the database. Never raises."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("✅ Database connection successful!")
        return True
    except SQLAlchemyError as e:
        logger.error(f"❌ Database connection failed: {e}")
        return False
