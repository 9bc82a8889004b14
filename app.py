import streamlit as st
import json
import pandas as pd
from pydantic import ValidationError

from api_client import (
    check_api_connection,
    fetch_default_percentages,
    fetch_summary,
    preview_split,
    validate_percentages,
)
from display import balance_rows, currency_symbol, format_amount, participant_name
from models import Bucket, SplitType

# Configure Streamlit page
st.set_page_config(
    page_title="Bucket Settlements",
    page_icon="🪣",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for better styling
st.markdown("""
<style>
    .main-header {
        font-size: 3rem;
        color: #1f77b4;
        text-align: center;
        margin-bottom: 2rem;
    }
    .success-box {
        padding: 1rem;
        border-radius: 0.5rem;
        background-color: #d4edda;
        border: 1px solid #c3e6cb;
        color: #155724;
    }
    .error-box {
        padding: 1rem;
        border-radius: 0.5rem;
        background-color: #f8d7da;
        border: 1px solid #f5c6cb;
        color: #721c24;
    }
    .info-box {
        padding: 1rem;
        border-radius: 0.5rem;
        background-color: #d1ecf1;
        border: 1px solid #bee5eb;
        color: #0c5460;
    }
</style>
""", unsafe_allow_html=True)

# Main App
def main():
    st.markdown('<h1 class="main-header">🪣 Bucket Settlements</h1>', unsafe_allow_html=True)

    # Check API connection
    if not check_api_connection():
        st.markdown(
            '<div class="error-box">❌ <strong>API Connection Error:</strong> '
            'FastAPI server is not running. Please start the server with: <code>python main.py</code></div>',
            unsafe_allow_html=True
        )
        st.stop()

    st.sidebar.title("🎛️ Control Panel")
    uploaded_file = st.sidebar.file_uploader("Bucket snapshot (JSON)", type=["json"])

    if uploaded_file is None:
        st.markdown(
            '<div class="info-box">📂 <strong>No Bucket Loaded:</strong> '
            'Upload a bucket snapshot with <code>bucket</code>, <code>expenses</code> and <code>credits</code>.</div>',
            unsafe_allow_html=True
        )
        return

    try:
        snapshot = json.load(uploaded_file)
        bucket = Bucket.model_validate(snapshot["bucket"])
    except (json.JSONDecodeError, KeyError, ValidationError) as e:
        st.markdown(f'<div class="error-box">❌ <strong>Invalid snapshot:</strong> {e}</div>', unsafe_allow_html=True)
        return

    app_mode = st.sidebar.selectbox("Choose App Mode", ["Settlement", "Split Preview"])

    if app_mode == "Settlement":
        settlement_page(bucket, snapshot)
    elif app_mode == "Split Preview":
        split_preview_page(bucket)

def settlement_page(bucket, snapshot):
    st.header(f"💸 {bucket.name}")
    symbol = currency_symbol(bucket.currency)

    with st.spinner("Calculating balances..."):
        summary, success = fetch_summary(snapshot)

    if not success:
        st.markdown(f'<div class="error-box">❌ <strong>Summary failed:</strong> {summary.get("detail", "Unknown error")}</div>', unsafe_allow_html=True)
        return

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Total Expenses", format_amount(summary["total_expenses"], symbol))
    with col2:
        st.metric("Total Credits", format_amount(summary["total_credits"], symbol))

    st.subheader("Balances")
    balances_data = balance_rows(bucket, summary["balances"], symbol)
    st.dataframe(pd.DataFrame(balances_data), use_container_width=True)

    st.subheader("Suggested Settlements")
    if summary["settlements"]:
        settlements_df = pd.DataFrame([{
            "From": participant_name(bucket, s["from"]),
            "To": participant_name(bucket, s["to"]),
            "Amount": format_amount(s["amount"], symbol)
        } for s in summary["settlements"]])
        st.dataframe(settlements_df, use_container_width=True)
    else:
        st.markdown('<div class="success-box">✅ <strong>Everyone is settled up!</strong></div>', unsafe_allow_html=True)

def split_preview_page(bucket):
    st.header("🧮 Split Preview")
    symbol = currency_symbol(bucket.currency)
    participant_ids = list(bucket.participants)

    amount = st.number_input(f"Amount ({symbol})", min_value=0.0, value=0.0, step=1.0)
    split_type = st.radio("Split", [SplitType.EVEN.value, SplitType.PERCENTAGE.value], horizontal=True)

    split = {"type": split_type}
    if split_type == SplitType.PERCENTAGE.value:
        defaults = fetch_default_percentages(participant_ids)
        percentages = {}
        for uid in participant_ids:
            percentages[uid] = st.number_input(
                f"{participant_name(bucket, uid)} (%)",
                min_value=0, max_value=100,
                value=int(defaults.get(uid, 0)),
                key=f"pct_{uid}"
            )
        check, success = validate_percentages(percentages)
        if success and not check["valid"]:
            st.warning(f"Percentages add up to {check['total']}%, not 100%")
        split["percentages"] = percentages

    if st.button("🚀 Preview", type="primary", use_container_width=True):
        result, success = preview_split(amount, split, participant_ids)
        if success:
            preview_df = pd.DataFrame([{
                "Participant": participant_name(bucket, uid),
                "Share": format_amount(share, symbol)
            } for uid, share in result["splits"].items()])
            st.dataframe(preview_df, use_container_width=True)
            st.metric("Allocated", format_amount(result["total"], symbol))
        else:
            st.markdown(f'<div class="error-box">❌ <strong>Preview failed:</strong> {result.get("detail", "Unknown error")}</div>', unsafe_allow_html=True)

if __name__ == "__main__":
    main()
