from fastapi import APIRouter

from resume_critic.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return HealthResponse(status="ok", message="Resume Critic API is running")
