"""Application-wide constants and configuration values."""

# Backend tables
COMPANIES_TABLE = "companies"
JOBS_TABLE = "jobs"
RECRUITERS_TABLE = "recruiters"

DEFAULT_DB_SCHEMA = "whitecarrot"
DEFAULT_PORT = 9000
DEFAULT_ALLOWED_ORIGINS = ["http://localhost:3000"]
DEFAULT_API_BASE_URL = "http://localhost:9000"

# Columns exposed to anonymous visitors
PUBLIC_COMPANY_COLUMNS = "name,slug,theme,sections,culture_video_url,status"
PUBLIC_JOB_COLUMNS = (
    "id,title,location,job_type,department,level,work_mode,salary_text,slug,posted_at"
)

# Theme fallbacks
DEFAULT_PRIMARY_COLOR = "#0f172a"
DEFAULT_ACCENT_COLOR = "#f97316"
DEFAULT_FONT = "inter"
