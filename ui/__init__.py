"""
Streamlit UI module.

Provides the web interface for the Route Planner:
- Network chart with the current route highlighted
- Forms for adding cities, connecting roads, and finding routes
"""
