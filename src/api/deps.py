import asyncio
from src.core.config import settings

async def simulated_latency():
    """
    Optional UX delay so the client can show its "analyzing" state.
    Lives at the HTTP boundary; the engines themselves never wait.
    """
    if settings.ANALYSIS_DELAY_SECONDS > 0:
        await asyncio.sleep(settings.ANALYSIS_DELAY_SECONDS)
