"""
Route Planner - add cities, connect them with roads, find shortest routes.
"""

import streamlit as st

from route_planner.config import USE_DEFAULT_CITIES
from route_planner.data import GraphStore
from route_planner.planner import RoutePlanner
from ui.components.actions import apply_action, set_default_cities, set_weighted, step_history
from ui.components.charts import create_network_figure

st.set_page_config(page_title="Route Planner", page_icon="🗺️", layout="wide")

store = GraphStore()

# Initialize session state
if "planner" not in st.session_state:
    st.session_state.planner = RoutePlanner.open(store, use_default_cities=USE_DEFAULT_CITIES)
if "use_default_cities" not in st.session_state:
    st.session_state.use_default_cities = USE_DEFAULT_CITIES
if "error" not in st.session_state:
    st.session_state.error = None

planner: RoutePlanner = st.session_state.planner


def apply(action, *args) -> None:
    """Run a planner action and remember its error, if any."""
    st.session_state.error = apply_action(planner, store, action, *args)


st.title("Route Planning System")
st.caption("Add cities, connect them with roads, and find the shortest path between locations.")

chart_col, form_col = st.columns([2, 1])

with form_col:
    manage_tab, find_tab = st.tabs(["Manage Cities", "Find Path"])

    with manage_tab:
        with st.form("add_city", clear_on_submit=True):
            city_name = st.text_input("City Name", placeholder="Enter city name")
            if st.form_submit_button("Add"):
                apply(planner.add_city, city_name)

        weighted = st.toggle("Weighted", value=planner.weighted)
        set_weighted(planner, store, weighted)
        st.caption(
            "Using Dijkstra's algorithm for weighted graphs"
            if planner.weighted
            else "Using BFS algorithm for unweighted graphs"
        )

        use_defaults = st.toggle("Use Default Cities", value=st.session_state.use_default_cities)
        if use_defaults != st.session_state.use_default_cities:
            st.session_state.use_default_cities = use_defaults
            set_default_cities(planner, store, use_defaults)
            st.session_state.error = None

        if st.button("Clear", use_container_width=True):
            planner.clear()
            store.clear()
            st.session_state.error = None

        cities = planner.cities
        with st.form("connect_cities"):
            source = st.selectbox("From", cities, index=None, key="connect_source")
            target = st.selectbox("To", cities, index=None, key="connect_target")
            distance = st.number_input(
                "Distance", min_value=0.0, value=1.0, disabled=not planner.weighted
            )
            if st.form_submit_button("Connect"):
                apply(planner.connect_cities, source or "", target or "", distance)

        if cities:
            to_remove = st.selectbox("Remove city", cities, index=None, key="remove_city")
            if st.button("Remove", disabled=to_remove is None):
                apply(planner.remove_city, to_remove)

        u1, u2 = st.columns(2)
        if u1.button("Undo", disabled=not planner.can_undo, use_container_width=True):
            step_history(planner, store)
        if u2.button("Redo", disabled=not planner.can_redo, use_container_width=True):
            step_history(planner, store, redo=True)

    with find_tab:
        cities = planner.cities
        with st.form("find_route"):
            route_source = st.selectbox("Source", cities, index=None, key="route_source")
            route_target = st.selectbox("Target", cities, index=None, key="route_target")
            if st.form_submit_button("Find Shortest Path", type="primary"):
                apply(planner.find_route, route_source or "", route_target or "")

route = planner.last_route

with chart_col:
    st.subheader("Graph Visualization")
    st.plotly_chart(
        create_network_figure(
            planner.graph,
            planner.positions,
            route.path if route else None,
            weighted=planner.weighted,
        ),
        use_container_width=True,
    )

    st.subheader("Path Results")
    if st.session_state.error:
        st.error(st.session_state.error)
    if route:
        label = "Dijkstra's Algorithm" if route.algorithm == "dijkstra" else "BFS"
        st.caption(f"Shortest path using {label}")
        st.write(" → ".join(route.path))
        st.metric("Total distance", f"{route.distance:g} {route.units}")
    elif not st.session_state.error:
        st.caption("Select source and target cities to find a path")
