import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Seed for the random board generator; reapplied on every reset
    RANDOM_SEED = int(os.environ.get('RANDOM_SEED', '2024'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Comma-separated list of browser origins allowed to call the API
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173',
        ).split(',')
        if origin.strip()
    ]
