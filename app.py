"""Streamlit front-end for HKID generation and validation."""
from __future__ import annotations

import pandas as pd
import streamlit as st

from hkid_checker import GenerateHkidUseCase, HkidError, ValidateHkidUseCase, build_context
from hkid_checker.application.dto import GenerationRequest, ValidationRequest
from hkid_checker.domain.prefixes import PrefixCatalog
from hkid_checker.domain.symbols import CardSymbol, parse_symbol
from hkid_checker.presentation.report import catalog_to_rows, outcome_to_row, render_csv, render_html


st.set_page_config(page_title="HKID Checker", layout="wide")
st.title("HKID Generator & Validator")


def catalog_dataframe(catalog: PrefixCatalog) -> pd.DataFrame:
    return pd.DataFrame(catalog_to_rows(catalog), columns=["prefix", "letters", "description"])


def symbols_dataframe() -> pd.DataFrame:
    return pd.DataFrame(
        [{"symbol": symbol.code, "meaning": symbol.message} for symbol in CardSymbol],
        columns=["symbol", "meaning"],
    )


if "history" not in st.session_state:
    st.session_state["history"] = []


context = build_context()
tabs = st.tabs(["Generate", "Validate", "Prefixes", "Symbols"])

with tabs[0]:
    col1, col2 = st.columns([2, 1])
    with col1:
        prefix_text = st.text_input("Prefix (leave blank for random)", key="gen_prefix")
    with col2:
        allow_unknown_gen = st.checkbox("Allow prefixes outside the catalog", key="gen_allow_unknown")

    if st.button("Generate", key="generate_btn"):
        request = GenerationRequest(
            prefix=prefix_text.strip() or None,
            must_exist_in_enum=not allow_unknown_gen,
        )
        try:
            response = GenerateHkidUseCase(context).execute(request)
        except HkidError as exc:
            st.error(str(exc))
        else:
            st.success(response.text)
            prefix = response.hkid.prefix
            st.caption(prefix.description or "Prefix not in the official catalog")
            st.session_state["history"].append(response.text)

    if st.session_state["history"]:
        st.subheader("Generated this session")
        st.dataframe(pd.DataFrame({"hkid": st.session_state["history"]}), hide_index=True)

with tabs[1]:
    hkid_text = st.text_input("HKID", placeholder="A123456(3)", key="val_text")
    col1, col2 = st.columns(2)
    with col1:
        allow_unknown_val = st.checkbox("Allow prefixes outside the catalog", key="val_allow_unknown")
    with col2:
        allow_bare = st.checkbox("Accept check character without parentheses", key="val_allow_bare")

    if st.button("Validate", key="validate_btn", disabled=not hkid_text):
        validator_context = build_context(require_parentheses=False) if allow_bare else context
        try:
            response = ValidateHkidUseCase(validator_context).execute(
                ValidationRequest(text=hkid_text, must_exist_in_enum=not allow_unknown_val)
            )
        except HkidError as exc:
            st.error(str(exc))
        else:
            outcome = response.outcome
            if outcome.is_valid:
                st.success(f"{outcome.canonical} is valid")
            else:
                st.warning(f"{outcome.canonical} is invalid; expected {outcome.expected}")
            st.dataframe(pd.DataFrame([outcome_to_row(outcome)]), hide_index=True)

with tabs[2]:
    catalog_df = catalog_dataframe(context.catalog)
    search_text = st.text_input("Search prefix/description", key="prefix_search")
    if search_text:
        pattern = str(search_text).strip().lower()
        mask = catalog_df.apply(
            lambda row: pattern in str(row.get("prefix", "")).lower()
            or pattern in str(row.get("description", "")).lower(),
            axis=1,
        )
        view_df = catalog_df[mask].copy()
    else:
        view_df = catalog_df.copy()
    st.caption(f"Total {len(catalog_df)} prefixes; showing {len(view_df)}")
    st.dataframe(view_df, hide_index=True, use_container_width=True)
    st.download_button(
        "Download catalog CSV",
        data=render_csv(catalog_to_rows(context.catalog)),
        file_name="hkid_prefixes.csv",
        mime="text/csv",
    )
    st.download_button(
        "Download catalog HTML",
        data=render_html(catalog_to_rows(context.catalog)).encode("utf-8"),
        file_name="hkid_prefixes.html",
        mime="text/html",
    )

with tabs[3]:
    symbol_text = st.text_input("Card symbol", placeholder="***, A, L2, H1", key="symbol_text")
    if symbol_text:
        info = parse_symbol(symbol_text)
        st.info(f"{info.code}: {info.message}")
    st.dataframe(symbols_dataframe(), hide_index=True, use_container_width=True)
