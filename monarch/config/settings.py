from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "Monarch Pro API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Database
    database_url: str = "sqlite:///./monarch.db"
    
    # CORS
    allowed_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Origins allowed to call the API"
    )
    
    # Profile defaults (used until the rep saves their own)
    default_rep_name: str = "Sales Rep"
    default_company: str = "Pepsi Company"
    
    # Sharing
    currency_label: str = "Rs."
    share_base_url: str = Field(
        default="https://wa.me/",
        description="Base URL for order share links"
    )
    
    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    
    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
