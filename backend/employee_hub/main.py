from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_hub.api.v1.router import api_router
from employee_hub.core.config import settings
from employee_hub.services.auth_service import AuthService
from employee_hub.services.employee_client import EmployeeClient
from employee_hub.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    employee_client = EmployeeClient()
    await employee_client.initialize(settings)

    application.state.employee_client = employee_client
    application.state.employee_store = EmployeeStore(employee_client)
    application.state.auth_service = AuthService.from_settings(settings)
    yield
    await employee_client.close()


app = FastAPI(
    title="Employee Hub API",
    description="Employee records, dashboard statistics and printable reports",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Hub API"}
