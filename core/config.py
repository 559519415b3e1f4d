from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    """
    Application configuration.

    - Secrets are NEVER stored in code.
    - All sensitive values are injected via environment variables (.env).
    - Validation happens at startup (fail fast).
    - Frozen: loaded once, then passed to services at construction.
    """

    # --------------------------------------------------
    # Payment gate
    # --------------------------------------------------
    WALLET_ADDRESS: str = ""
    PAYMENT_PROOF_SOURCE: str = "body"  # "body" | "header" | "disabled"
    PAYMENT_HEADER_NAME: str = "X-PAYMENT"

    USDC_CONTRACT: str = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
    MINIMUM_PAYMENT_UNITS: int = 9000  # $0.01 USDC (6 decimals)
    TOKEN_DECIMALS: int = 6

    PRICE_LABEL: str = "$0.01 USDC"
    NETWORK_LABEL: str = "Base"

    # --------------------------------------------------
    # Block explorers
    # --------------------------------------------------
    BLOCKSCOUT_BASE_URL: str = "https://base.blockscout.com"

    ETHERSCAN_BASE_URL: str = "https://api.etherscan.io/v2/api"
    ETHERSCAN_API_KEY: str
    ETHERSCAN_CHAIN_ID: int = 1
    TX_PAGE_SIZE: int = 100

    # --------------------------------------------------
    # Outbound HTTP policy
    # --------------------------------------------------
    HTTP_TIMEOUT_SECONDS: float = 20.0
    HTTP_RETRIES: int = 0

    # --------------------------------------------------
    # AI Provider (Groq / OpenAI / None)
    # --------------------------------------------------
    AI_ENABLED: bool = True
    AI_PROVIDER: str = "groq"  # "none" | "groq" | "openai"
    GROQ_API_KEY: str | None = None
    OPENAI_API_KEY: str | None = None

    AI_MODEL: str = "llama-3.3-70b-versatile"
    AI_MAX_TOKENS: int = 300
    AI_TIMEOUT_SECONDS: float = 15.0
    AI_MAX_RETRIES: int = 0

    # --------------------------------------------------
    # Server
    # --------------------------------------------------
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    STATIC_DIR: str = "public"

    class Config:
        env_file = ".env"
        extra = "ignore"   # Ignore unrelated env vars (Docker / CI friendly)
        frozen = True

    def model_post_init(self, __context) -> None:
        """
        Fail fast on combinations that would break every request.
        """
        if self.PAYMENT_PROOF_SOURCE not in ("body", "header", "disabled"):
            raise ValueError(
                f"PAYMENT_PROOF_SOURCE must be body, header or disabled (got {self.PAYMENT_PROOF_SOURCE!r})"
            )

        if self.PAYMENT_PROOF_SOURCE != "disabled" and not self.WALLET_ADDRESS:
            raise ValueError("Payment gating requires WALLET_ADDRESS in .env")

        if self.AI_ENABLED and self.AI_PROVIDER == "groq" and not self.GROQ_API_KEY:
            raise ValueError("AI_ENABLED=true and AI_PROVIDER=groq require GROQ_API_KEY in .env")

        if self.AI_ENABLED and self.AI_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            raise ValueError("AI_ENABLED=true and AI_PROVIDER=openai require OPENAI_API_KEY in .env")

    @property
    def ai_active(self) -> bool:
        return self.AI_ENABLED and self.AI_PROVIDER in ("groq", "openai")

    @property
    def receiver(self) -> str:
        return self.WALLET_ADDRESS.lower()


settings = Settings()
