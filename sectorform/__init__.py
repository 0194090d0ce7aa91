"""
sectorform：行业选择表单客户端（Streamlit + REST API）。
"""

__version__ = "1.0.0"
