import logging
from app import app
from config import ENVIRONMENT, PORT
from database.connection import check_connection, init_db
from sqlalchemy.exc import SQLAlchemyError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    port = PORT
    is_production = ENVIRONMENT == 'production'

    logger.info(f"🚀 VanillaSoft Webhook Server running on http://localhost:{port}")
    logger.info(f"Environment: {'Production' if is_production else 'Development'}")
    logger.info(f"📡 Call History endpoint: http://localhost:{port}/webhook/call")
    logger.info(f"👤 Contact endpoint: http://localhost:{port}/webhook/contact")
    logger.info(f"🏥 Health check: http://localhost:{port}/health")

    # The server still starts without a database so payloads can be inspected
    logger.info("Testing database connection...")
    if check_connection():
        try:
            init_db()
            logger.info("💾 Ready to receive and save webhook data to MySQL!")
        except SQLAlchemyError as e:
            logger.error(f"❌ Could not create tables: {e}")

    # Use Flask server (Gunicorn handled by Docker in production)
    app.run(host='0.0.0.0', port=port, debug=not is_production)
