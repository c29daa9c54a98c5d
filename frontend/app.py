"""Streamlit frontend for Midas.

Replaceable UI layer: all display logic lives here.
Every product operation goes through the HTTP API via MidasAPIClient.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import streamlit as st

from midas.client import MidasAPIClient, MidasAPIError
from midas.config import get_midas_settings

# ── Page config (must be first Streamlit call) ─────────────────────────────
st.set_page_config(
    page_title="Midas",
    page_icon="💰",
    layout="centered",
)

_RETAILER_BADGE = {
    "Amazon": "🟠",
    "Best Buy": "🔵",
}


@st.cache_resource(show_spinner=False)
def _load_client() -> MidasAPIClient:
    return MidasAPIClient(settings=get_midas_settings())


# ── Session state defaults ─────────────────────────────────────────────────
_STATE_DEFAULTS: dict = {
    "actor": None,
    "flash_success": None,
    "flash_error": None,
}

for _key, _val in _STATE_DEFAULTS.items():
    if _key not in st.session_state:
        st.session_state[_key] = _val


def _products_frame(products: list[dict], *, show_owner: bool) -> pd.DataFrame:
    rows = []
    for product in products:
        row = {
            "Name": product["name"],
            "Retailer": f"{_RETAILER_BADGE.get(product['retailer'], '⚪')} {product['retailer']}",
            "Target Price": (
                f"${product['target_price']:.2f}" if product.get("target_price") is not None else "—"
            ),
            "URL": product["url"],
            "Added": product["created_at"],
        }
        if show_owner:
            row["Added by"] = product["added_by"]
        rows.append(row)
    return pd.DataFrame(rows)


# ── Renderers ──────────────────────────────────────────────────────────────
def _render_login(client: MidasAPIClient) -> None:
    st.title("Midas")
    st.caption("Please sign in to your account")

    with st.form("login"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", type="primary", use_container_width=True)

    if submitted:
        try:
            st.session_state.actor = client.login(username, password)
        except MidasAPIError as exc:
            st.error(exc.message)
            return
        st.rerun()


def _render_flash() -> None:
    if st.session_state.flash_error:
        st.error(st.session_state.flash_error)
        st.session_state.flash_error = None
    if st.session_state.flash_success:
        st.success(st.session_state.flash_success)
        st.session_state.flash_success = None


def _render_add_form(client: MidasAPIClient, user: str, retailers: list[str]) -> None:
    st.subheader("Add Product to Track")
    st.caption("Submit products you'd like to track for availability and price changes.")
    st.info("Currently Supported Retailers: " + ", ".join(retailers))

    with st.form("add_product", clear_on_submit=True):
        url = st.text_input(
            "Product URL",
            placeholder="https://www.amazon.com/dp/B08FC6MR62 or https://www.bestbuy.com/site/...",
        )
        name = st.text_input("Product Name", placeholder="e.g. PlayStation 5 Digital Edition")
        retailer = st.selectbox("Retailer", retailers)
        target_price = st.text_input("Target Price (Optional)", placeholder="399.99")
        submitted = st.form_submit_button("Add Product", type="primary", use_container_width=True)

    if submitted:
        try:
            st.session_state.flash_success = client.add_product(
                user=user,
                url=url,
                name=name,
                retailer=retailer or "",
                target_price=target_price or None,
            )
        except MidasAPIError as exc:
            st.session_state.flash_error = exc.message
        st.rerun()


def _render_recent(dashboard: dict) -> None:
    st.subheader("Your Tracked Products")
    recent: list[dict] = dashboard.get("recent_products", [])
    if not recent:
        st.info("You haven't added any products to track yet.")
        return

    if dashboard["is_admin"]:
        st.caption("Admin View: showing all user products")

    for product in recent:
        with st.container(border=True):
            header = product["name"]
            if dashboard["is_admin"] and product["added_by"] != dashboard["username"]:
                header += f"  ·  Added by: {product['added_by']}"
            st.markdown(f"**{header}**")
            st.markdown(f"[View on {product['retailer']}]({product['url']})")
            if product.get("target_price") is not None:
                st.caption(f"Target Price: ${product['target_price']:.2f}")


def _render_all_products(client: MidasAPIClient, user: str) -> None:
    listing = client.products(user)
    title = "All User Products" if listing["is_admin"] else "Your Tracked Products"
    with st.expander(f"View All Products ({len(listing['products'])})"):
        st.markdown(f"**{title}**")
        if not listing["products"]:
            st.info("No products tracked yet.")
            return
        st.dataframe(
            _products_frame(listing["products"], show_owner=listing["is_admin"]),
            use_container_width=True,
            hide_index=True,
        )


def _render_dashboard(client: MidasAPIClient, actor: dict) -> None:
    user: str = actor["username"]
    dashboard = client.dashboard(user)

    cols = st.columns([4, 1])
    with cols[0]:
        st.title("Dashboard")
        if dashboard["is_admin"]:
            st.caption("Admin dashboard: you can view and manage all user products")
        else:
            st.caption("Welcome to your Midas Product Tracker dashboard!")
    with cols[1]:
        if dashboard["is_admin"]:
            st.markdown(":violet[**Admin**]")
        if st.button("Sign Out"):
            st.session_state.actor = None
            st.rerun()

    _render_flash()
    _render_add_form(client, user, dashboard["retailers"])
    st.divider()
    _render_recent(dashboard)
    _render_all_products(client, user)


# ── Main content area ──────────────────────────────────────────────────────
_client = _load_client()
_actor: Optional[dict] = st.session_state.actor

try:
    if _actor is None:
        _render_login(_client)
    else:
        _render_dashboard(_client, _actor)
except MidasAPIError as exc:
    st.error(f"API error: {exc.message}")
