from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATA_DIR: str = "./data"
    STUDENTS_FILE: str = "students.json"
    QUESTIONS_FILE: str = "questions.json"
    STUDENT_RESPONSES_FILE: str = "student-responses.json"
    ASSESSMENTS_FILE: str = "assessments.json"

    ASSESSMENT_FALLBACK_NAME: str = "Assessment"

    LOG_LEVEL: str = "INFO"


settings = Settings()
