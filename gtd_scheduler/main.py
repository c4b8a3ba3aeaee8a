from fastapi import FastAPI
from gtd_scheduler.database import engine
from gtd_scheduler.models import Base
from gtd_scheduler.routes import schedule, user_preferences

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title="GTD Scheduler API",
    description="Automatic day scheduling of actionable tasks into focus and break slots",
    version="1.0.0"
)

# Include routers
app.include_router(user_preferences.router, prefix="/users", tags=["users"])
app.include_router(schedule.router, prefix="/schedule", tags=["schedule"])

@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": "Welcome to the GTD Scheduler API",
        "version": "1.0.0",
        "endpoints": {
            "preferences": "GET/PUT /users/{user_id}/preferences - Working-day configuration",
            "auto": "POST /schedule/{user_id}/auto?date=YYYY-MM-DD - Schedule and save",
            "preview": "GET /schedule/{user_id}/preview?date=YYYY-MM-DD - Schedule without saving",
            "slots": "GET /schedule/{user_id}/slots?date=YYYY-MM-DD - Focus/break layout of the day"
        },
        "swagger_ui": "/docs - Interactive API documentation",
        "redoc": "/redoc - Alternative API documentation"
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# This allows running the app directly with: python -m gtd_scheduler.main
if __name__ == "__main__":
    import uvicorn
    print("🚀 Starting GTD Scheduler API...")
    print("📖 API Documentation: http://localhost:8000/docs")
    uvicorn.run("gtd_scheduler.main:app", host="0.0.0.0", port=8000, reload=True)
