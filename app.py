from sectorform.web.framework.page import init_page, PageSpec
from sectorform.web.pages_impl.sector_form import render

# MUST be the first Streamlit command on this page
init_page(PageSpec(title="Sectors", icon="🗂️"))

render()
