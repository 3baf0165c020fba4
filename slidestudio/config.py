import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application configuration settings."""
    
    # Image provider selection ("gemini" or "openai")
    IMAGE_PROVIDER: str = os.getenv("IMAGE_PROVIDER", "gemini")
    
    # Gemini Configuration
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_API_KEY", ""))
    GEMINI_IMAGE_MODEL: str = os.getenv("GEMINI_IMAGE_MODEL", "gemini-3-pro-image-preview")
    IMAGE_ASPECT_RATIO: str = os.getenv("IMAGE_ASPECT_RATIO", "16:9")
    
    # OpenAI Configuration
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_IMAGE_MODEL: str = os.getenv("OPENAI_IMAGE_MODEL", "gpt-image-1")
    OPENAI_IMAGE_SIZE: str = os.getenv("OPENAI_IMAGE_SIZE", "1536x1024")
    
    # Storage
    PUBLIC_DIR: str = os.getenv("PUBLIC_DIR", "public")
    FEEDBACK_DIR: str = os.getenv("FEEDBACK_DIR", "feedback")
    PREFERRED_SLIDE_DATE: str = os.getenv("PREFERRED_SLIDE_DATE", "2026-01-06")
    
    # Generation
    DEFAULT_DETAIL_LEVEL: int = int(os.getenv("DEFAULT_DETAIL_LEVEL", "50"))
    COMPOSER_MAX_QUEUE: int = int(os.getenv("COMPOSER_MAX_QUEUE", "50"))
    
    # App Configuration
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    PORT: int = int(os.getenv("PORT", "8000"))

    @property
    def slides_root(self) -> str:
        return os.path.join(self.PUBLIC_DIR, "generated-slides")

    @property
    def feedback_log_path(self) -> str:
        return os.path.join(self.FEEDBACK_DIR, "feedback_log.txt")

# Global settings instance
settings = Settings()
