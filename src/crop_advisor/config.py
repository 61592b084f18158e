import os

AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

# Plan store: memory, file or dynamodb
PLAN_STORE_BACKEND = os.environ.get("PLAN_STORE_BACKEND", "file")
PLAN_STORE_DIR = os.environ.get("PLAN_STORE_DIR", os.path.join(os.path.expanduser("~"), ".crop_advisor"))
PLAN_STORE_KEY = os.environ.get("PLAN_STORE_KEY", "savedFarmingCalendars")
PLANS_TABLE = os.environ.get("PLANS_TABLE", "crop-advisor-plans")

RECOMMENDATION_LIMIT = int(os.environ.get("RECOMMENDATION_LIMIT", "3"))
COMPARE_LIMIT = int(os.environ.get("COMPARE_LIMIT", "3"))
