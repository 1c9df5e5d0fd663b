"""Shared test fixtures for the scraper test suite."""

from unittest.mock import MagicMock

import pytest
from bs4 import BeautifulSoup

PRODUCT_URL = "https://example.com/commercia/product.html"

PRODUCT_HTML = """
<html>
<head><meta charset="utf-8"><title>Commercia</title></head>
<body>
  <nav class="current-category">
    <a href="/">Home</a> &gt;
    <a href="/kitchen">Kitchen</a> &gt;
    <a href="/kitchen/mixers">Mixers</a>
  </nav>
  <h2 id="product_title">Stand Mixer 5L</h2>
  <div class="brand">MixMaster</div>
  <div class="proddet">
    <p>A sturdy mixer for bread and cakes.</p>
    <p>Second paragraph is ignored.</p>
  </div>

  <div class="skus-area">
    <div class="card-container">
      <div class="prod-nome">Stand Mixer 5L - Red</div>
      <div class="prod-pnow">R$ 1.234,56</div>
      <div class="prod-pold">R$ 1.499,90</div>
    </div>
    <div class="card-container">
      <div class="prod-nome">Stand Mixer 5L - Black</div>
      <div class="prod-pnow">R$ 999,00</div>
      <i>Out of stock</i>
    </div>
  </div>

  <h4>Product properties</h4>
  <table>
    <tbody>
      <tr><td><b>Voltage</b></td><td>220V</td></tr>
      <tr><td><b>Color</b></td><td>Red</td></tr>
    </tbody>
  </table>

  <div id="propadd">
    <h4>Additional properties</h4>
    <table>
      <tbody>
        <tr><td><b>Warranty</b></td><td>12 months</td></tr>
        <tr><td><b>Color</b></td><td>Black</td></tr>
      </tbody>
    </table>
  </div>

  <div id="comments">
    <div class="analisebox">
      <span class="analiseusername">Ana</span>
      <span class="analisedate">01/02/2020</span>
      <span class="analisestars">★★★★★</span>
      <p>Great mixer.</p>
    </div>
    <div class="analisebox">
      <span class="analiseusername">Bruno</span>
      <span class="analisedate">03/04/2020</span>
      <span class="analisestars">★★☆☆☆</span>
      <p>Too loud.</p>
    </div>
  </div>
</body>
</html>
"""


@pytest.fixture
def product_url():
    return PRODUCT_URL


@pytest.fixture
def product_html():
    """HTML of a complete product page."""
    return PRODUCT_HTML


@pytest.fixture
def product_soup(product_html):
    return BeautifulSoup(product_html, "html.parser")


@pytest.fixture
def mock_session(product_html):
    """A requests.Session mock that returns the product page."""
    response = MagicMock()
    response.status_code = 200
    response.encoding = "utf-8"
    response.text = product_html
    response.content = product_html.encode("utf-8")
    response.raise_for_status.return_value = None

    session = MagicMock()
    session.get.return_value = response
    return session
