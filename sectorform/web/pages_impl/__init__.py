"""Page implementations (render functions) for the Streamlit app.

`app.py` stays a thin wrapper that:
- calls init_page(...)
- calls the render() function here
"""
