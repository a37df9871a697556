from dotenv import load_dotenv
from dataclasses import dataclass
from typing import List, Literal
from pathlib import Path
import json
import os

from pydantic import BaseModel, Field

load_dotenv()  # Loads variables from .env file


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    USER_AGENT = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    )
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")


settings = Settings()


@dataclass
class Config:
    """Configuration for the batch crawler."""
    user_agent: str = settings.USER_AGENT
    timeout: int = 10  # seconds
    rate_limit: float = 1.0  # seconds between requests
    max_retries: int = 1
    use_browser: bool = False
    log_level: str = "INFO"
    output_path: str = "crawl-report.json"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("USER_AGENT", settings.USER_AGENT),
            timeout=int(os.getenv("TIMEOUT", "10")),
            rate_limit=float(os.getenv("RATE_LIMIT", "1.0")),
            max_retries=int(os.getenv("MAX_RETRIES", "1")),
            use_browser=os.getenv("USE_BROWSER", "false").lower() in ("1", "true", "yes"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            output_path=os.getenv("OUTPUT_PATH", "crawl-report.json"),
        )


@dataclass
class DetectionSettings:
    """Configurable knobs of the QA block detection."""

    # Semantic detection scope: direct <heading_tag> children of this container
    container_selector: str = ".content-container"
    heading_tag: str = "h2"

    # Skip headings whose enclosing block is already a schema.org Question.
    # Off by default: the deployed audit reports every heading.
    exclude_structured_headings: bool = False

    # Content checks
    min_title_length: int = 10
    min_answer_length: int = 20
    max_answer_text_length: int = 200

    # BeautifulSoup parser used for raw markup
    parser: str = "html.parser"

    @classmethod
    def from_env(cls) -> "DetectionSettings":
        """Load settings from environment variables.

        Environment variables should be prefixed with FAQAUDIT_
        e.g., FAQAUDIT_CONTAINER_SELECTOR=".faq"

        Returns:
            DetectionSettings with values from environment
        """
        detection = cls()
        prefix = "FAQAUDIT_"

        for field_name in detection.__dataclass_fields__:
            env_key = f"{prefix}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                try:
                    setattr(detection, field_name, detection._convert(field_name, env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return detection

    @classmethod
    def from_file(cls, path: str) -> "DetectionSettings":
        """Load settings from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            DetectionSettings with values from file

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or a value has the wrong type
        """
        detection = cls()
        file_path = Path(path)

        with open(file_path, 'r', encoding='utf-8') as f:
            config = json.load(f)

        detection_config = config.get('detection', config)

        for field_name in detection.__dataclass_fields__:
            if field_name in detection_config:
                value = detection_config[field_name]
                try:
                    setattr(detection, field_name, detection._convert(field_name, value))
                except (TypeError, ValueError) as e:
                    raise ValueError(f"Invalid value for {field_name} in {path}: {value!r}") from e

        return detection

    def _convert(self, field_name: str, value):
        """Convert a raw setting value to the type of its field."""
        field_type = self.__dataclass_fields__[field_name].type
        if field_type == bool:
            if isinstance(value, bool):
                return value
            if isinstance(value, str) and value.lower() in ("1", "true", "yes", "0", "false", "no"):
                return value.lower() in ("1", "true", "yes")
            raise ValueError(f"Not a boolean: {value!r}")
        if field_type == int:
            if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                raise ValueError(f"Not an integer: {value!r}")
            return int(value)
        if not isinstance(value, str):
            raise ValueError(f"Not a string: {value!r}")
        return value

    def to_dict(self) -> dict:
        """Convert settings to dictionary.

        Returns:
            Dictionary of all setting values
        """
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }

    def save_to_file(self, path: str) -> None:
        """Save current settings to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w', encoding='utf-8') as f:
            json.dump({'detection': self.to_dict()}, f, indent=2)


class BrowserConfig(BaseModel):
    """
    Configuration for the Playwright-based BrowserFetcher.

    All fields are validated by Pydantic to ensure type safety and valid values.
    """

    headless: bool = Field(
        default=True,
        description="Run browser in headless mode (no visible UI)"
    )

    browser_type: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium",
        description="Browser engine to use for fetching"
    )

    timeout: int = Field(
        default=30000,
        description="Page load timeout in milliseconds",
        ge=1000,
        le=300000
    )

    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = Field(
        default="networkidle",
        description="When to consider navigation complete"
    )

    launch_args: List[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"],
        description="Extra command line arguments passed to the browser"
    )


# Global default detection settings instance
default_detection = DetectionSettings()
