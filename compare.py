# compare.py
import io

import pandas as pd
import streamlit as st

from fuzzscore import SCORER_REGISTRY
from fuzzscore.frame import compare_frame, summarize

LABELS = ("PROPUESTA USUARIO", "PROPUESTA IA", "IGUALES")

st.set_page_config(page_title="Comparador de sugerencias", layout="wide")
st.title("📒 Comparador de sugerencias")

st.write("Sube un archivo .xlsx o .xls para visualizarlo.")

with st.sidebar:
    st.write("Scorers cargados:", list(SCORER_REGISTRY.keys()))
    metodos = st.multiselect(
        "Métodos de similitud (0–100)",
        options=list(SCORER_REGISTRY.keys()),
        default=[k for k in ("token_set_ratio", "ratio") if k in SCORER_REGISTRY],
    )

archivo = st.file_uploader("Elegir archivo Excel", type=["xlsx", "xls"])


@st.cache_data(show_spinner=False)
def obtener_hojas(bytes_data: bytes):
    # Devuelve solo los nombres de hojas (tipos serializables)
    xls = pd.ExcelFile(io.BytesIO(bytes_data))
    return xls.sheet_names


@st.cache_data(show_spinner=False)
def leer_hoja(bytes_data: bytes, hoja: str, header_row: int) -> pd.DataFrame:
    return pd.read_excel(
        io.BytesIO(bytes_data), sheet_name=hoja, header=header_row, engine="openpyxl"
    )


def _highlight_row_best(row: pd.Series):
    # Mayor en verde; IGUALES en amarillo
    styles = pd.Series("", index=row.index)
    for key in metodos:
        ucol, icol = f"score_vs_user_{key}", f"score_vs_best_{key}"
        if ucol not in row.index or icol not in row.index:
            continue
        u, i = row[ucol], row[icol]
        if pd.isna(u) or pd.isna(i):
            continue
        if u == i:
            styles[ucol] = styles[icol] = "background-color: #fff3cd"
        elif i > u:
            styles[icol] = "background-color: #d4edda"
        else:
            styles[ucol] = "background-color: #d4edda"
    return styles


if archivo is not None:
    try:
        bytes_data = archivo.getvalue()
        hojas = obtener_hojas(bytes_data)
        hoja = st.selectbox("Selecciona la hoja", hojas, index=0)

        col1, col2 = st.columns([1, 1])
        with col1:
            max_filas = st.number_input("Filas a mostrar", min_value=5, max_value=10000, value=100, step=5)
        with col2:
            header_row = st.number_input("Fila de encabezado (0-index)", min_value=0, value=0, step=1)

        df = leer_hoja(bytes_data, hoja, int(header_row))
        st.caption(f"Hoja **{hoja}** — {df.shape[0]:,} filas × {df.shape[1]:,} columnas")
        st.dataframe(df.head(int(max_filas)), use_container_width=True)

        st.subheader("Comparar columnas por similitud (0–100)")
        cols = list(df.columns.astype(str))
        df.columns = cols
        c1, c2, c3 = st.columns([1.2, 1.2, 1.6])
        with c1:
            col_cliente = st.selectbox("Solicitud del cliente (1)", options=cols, index=0 if cols else None, key="sel_cliente")
        with c2:
            col_usuario = st.selectbox("PROPUESTA USUARIO (1)", options=cols, index=min(1, len(cols) - 1) if len(cols) > 1 else 0, key="sel_usuario")
        with c3:
            cols_ia = st.multiselect("PROPUESTA IA (1+)", options=cols, default=[cols[0]] if cols else [], key="sel_ia")

        if not metodos:
            st.warning("Selecciona al menos un método de similitud en la barra lateral.")
        elif cols and col_cliente and col_usuario:
            with st.spinner("Calculando similitudes..."):
                df_out = compare_frame(df, col_cliente, col_usuario, cols_ia, metodos, LABELS)

            # Solo columnas seleccionadas + scores y ganadores por método
            view_cols = []
            for c in [col_cliente, col_usuario, *cols_ia]:
                if c not in view_cols:
                    view_cols.append(c)
            for key in metodos:
                for c in (f"score_vs_user_{key}", f"score_vs_best_{key}", f"best_column_{key}", f"winner_{key}"):
                    if c in df_out.columns:
                        view_cols.append(c)
            df_view = df_out[view_cols].head(int(max_filas))
            try:
                st.dataframe(df_view.style.apply(_highlight_row_best, axis=1), use_container_width=True)
            except Exception as e:
                st.warning(f"No se pudo aplicar el resaltado. Detalle: {e}")
                st.dataframe(df_view, use_container_width=True)

            for key in metodos:
                st.subheader(f"Estadísticas — Mejores e IGUALES ({key})")
                counts = df_out[f"winner_{key}"].value_counts(dropna=True)
                cA, cB, cC = st.columns(3)
                with cA:
                    st.metric(f"Mejores PROPUESTA USUARIO ({key})", f"{int(counts.get(LABELS[0], 0))}")
                with cB:
                    st.metric(f"Mejores PROPUESTA IA ({key})", f"{int(counts.get(LABELS[1], 0))}")
                with cC:
                    st.metric(f"IGUALES ({key})", f"{int(counts.get(LABELS[2], 0))}")

            df_resumen = summarize(df_out, metodos, LABELS)
            if not df_resumen.empty:
                _file_label = getattr(archivo, "name", None)
                if _file_label:
                    st.subheader(f"Resumen general de métodos — Archivo: {_file_label}")
                else:
                    st.subheader("Resumen general de métodos")
                sty = df_resumen.style.highlight_max(subset=[LABELS[0], LABELS[1]], axis=1, color="#d4edda")
                st.dataframe(sty, use_container_width=True)

            csv = df_out.to_csv(index=False).encode("utf-8")
            st.download_button("Descargar resultados (CSV)", csv, file_name="comparacion.csv")
    except Exception as e:
        st.error(f"Ocurrió un error leyendo el archivo: {e}")
else:
    st.info("👆 Arrastra o selecciona un archivo para comenzar.")
