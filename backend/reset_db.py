"""
Database Reset Script
Run this to drop all tables, rebuild the schema fresh and store the
configured system rates.
"""

import asyncio
import sys
sys.path.append('src')

from domain.value_objects import SystemRates
from infrastructure.config import get_logger, get_settings, setup_logger
from infrastructure.database import Base, SQLAlchemyUnitOfWork, build_engine, build_session_factory
from infrastructure.database import models  # noqa: F401

logger = get_logger(__name__)


async def reset_database():
    """Drop all tables, recreate them and seed the system rates."""
    settings = get_settings()
    engine = build_engine(settings.database_url, echo=settings.database_echo)
    try:
        logger.info("🔥 Dropping all tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("✅ All tables dropped")
        
        logger.info("🏗️ Creating fresh tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with SQLAlchemyUnitOfWork(build_session_factory(engine)) as uow:
            await uow.rates.save(SystemRates(min_wage_per_hour=settings.default_min_wage_per_hour))
            await uow.commit()
        logger.info(f"✅ Fresh database ready! Minimum wage {settings.default_min_wage_per_hour}/hour")
        
    except Exception as e:
        logger.error(f"❌ Error: {e}")
        raise
    finally:
        await engine.dispose()

if __name__ == "__main__":
    setup_logger(level=get_settings().log_level, log_format="text")
    print("\n⚠️  WARNING: This will DELETE ALL DATA in the database!\n")
    response = input("Are you sure? Type 'yes' to continue: ")
    
    if response.lower() == 'yes':
        asyncio.run(reset_database())
        print("\n✅ Database has been reset successfully!\n")
    else:
        print("\n❌ Cancelled.\n")
