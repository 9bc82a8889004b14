"""
HTTP helpers the dashboard uses to talk to the settlement API.

Every call returns ``(payload, success)`` or a fallback value instead of
raising, so a dead API shows up as an error box rather than a crash.
"""
import requests

import config

API_BASE_URL = config.API_BASE_URL

def check_api_connection():
    """Check if the FastAPI server is running"""
    try:
        response = requests.get(f"{API_BASE_URL}/")
        return response.status_code == 200
    except requests.RequestException:
        return False

def fetch_summary(snapshot):
    """Call the bucket summary API"""
    try:
        response = requests.post(f"{API_BASE_URL}/buckets/summary", json=snapshot)
        return response.json(), response.status_code == 200
    except requests.RequestException as e:
        return {"detail": str(e)}, False

def preview_split(amount, split, participant_ids):
    """Call the split preview API"""
    try:
        payload = {
            "transaction": {"amount": amount, "split": split},
            "participant_ids": participant_ids
        }
        response = requests.post(f"{API_BASE_URL}/splits/preview", json=payload)
        return response.json(), response.status_code == 200
    except requests.RequestException as e:
        return {"detail": str(e)}, False

def validate_percentages(percentages):
    """Call the percentage check API"""
    try:
        response = requests.post(f"{API_BASE_URL}/splits/validate", json={"percentages": percentages})
        return response.json(), response.status_code == 200
    except requests.RequestException as e:
        return {"detail": str(e)}, False

def fetch_default_percentages(participant_ids):
    try:
        response = requests.post(
            f"{API_BASE_URL}/splits/default-percentages",
            json={"participant_ids": participant_ids}
        )
        if response.status_code == 200:
            return response.json()["percentages"]
        return {}
    except requests.RequestException:
        return {}
