import logging

logging.basicConfig(level=logging.WARNING)
logging.getLogger('sqlalchemy.engine').setLevel(logging.ERROR)

from flask import Flask, jsonify
from config import ENVIRONMENT
from database.connection import check_connection
from services.webhook_service import handle_call_webhook, handle_contact_webhook
from utils.time_utils import utc_now_iso

app = Flask(__name__)

ENDPOINTS = {
    'Call History': 'POST /webhook/call',
    'Contact Data': 'POST /webhook/contact',
    'Health Check': 'GET /health',
}


# Add security headers for production
@app.after_request
def add_security_headers(response):
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'DENY'
    response.headers['X-XSS-Protection'] = '1; mode=block'
    if ENVIRONMENT == 'production':
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
    return response

@app.route("/")
def index():
    return jsonify({
        "message": "VanillaSoft to MySQL Webhook Server",
        "endpoints": ENDPOINTS,
        "timestamp": utc_now_iso(),
    })

@app.route("/health")
def health():
    return jsonify({
        "status": "healthy",
        "timestamp": utc_now_iso(),
        "database": "connected" if check_connection() else "unavailable",
        "endpoints": list(ENDPOINTS.values()),
    })


@app.route("/webhook/call", methods=["POST"])
def call_webhook():
    return handle_call_webhook()

@app.route("/webhook/contact", methods=["POST"])
def contact_webhook():
    return handle_contact_webhook()
