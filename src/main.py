"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from .auth.router import router as auth_router
from .patients.router import router as patients_router
from .medical_records.router import router as medical_records_router
from .admissions.router import router as admissions_router
from .billing.router import router as billing_router
from .chat.router import router as chat_router
from .database import Base, engine, get_db
from .config import settings
from .exceptions import register_exception_handlers
from .core.middleware import setup_middlewares
from .core.bootstrap import bootstrap_staff_if_needed

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create database tables if they don't exist
Base.metadata.create_all(bind=engine)

# Bootstrap staff account creation
logger.info("🚀 Starting Hospital Patient Management API...")
try:
    db = next(get_db())
    bootstrap_staff_if_needed(db)
    db.close()
except Exception as e:
    logger.error(f"❌ Bootstrap process failed: {str(e)}")

# Create FastAPI application
app = FastAPI(
    title="Hospital Patient Management API",
    description="Patients, medical records, admissions, billing and an AI patient assistant",
    version="1.0.0"
)

# Register exception handlers
register_exception_handlers(app)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware
setup_middlewares(app)

# Include routers
app.include_router(auth_router, prefix="/api/v1/auth", tags=["Authentication"])
app.include_router(patients_router, prefix="/api/v1/patients", tags=["Patients"])
app.include_router(medical_records_router, prefix="/api/v1/patients", tags=["Medical Records"])
app.include_router(admissions_router, prefix="/api/v1/patients", tags=["Admissions"])
app.include_router(billing_router, prefix="/api/v1/patients", tags=["Billing"])
app.include_router(chat_router, prefix="/api/v1/chat", tags=["AI Assistant"])

# Root endpoint
@app.get("/")
def root():
    """
    Root endpoint for API health check.

    Returns:
        dict: Welcome message and API version
    """
    return {"message": "Welcome to Hospital Patient Management API", "version": app.version}

# Health check endpoint
@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns:
        dict: Health status information
    """
    return {"status": "healthy", "database": "connected"}
