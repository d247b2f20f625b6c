import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")

# Pomodoro timer
WORK_MINUTES = int(os.getenv("WORK_MINUTES", "25"))
BREAK_MINUTES = int(os.getenv("BREAK_MINUTES", "5"))
TIMER_TICK_SECONDS = float(os.getenv("TIMER_TICK_SECONDS", "1.0"))

# Analytics window in days
ANALYTICS_DAYS = int(os.getenv("ANALYTICS_DAYS", "7"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
