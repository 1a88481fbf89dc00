"""
Pytest fixtures for structdoc tests.
"""

import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for structdoc imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


SAMPLE_MODELS_GO = '''package example

// User 表示系统中的用户实体
// 包含用户的基本信息
type User struct {
	// ID 是用户的唯一标识
	ID int `json:"id"`
	// Name 是用户的显示名称
	Name string `json:"name"` // 用户名称
	// Email 是用户的邮箱地址
	Email   string   `json:"email"` // 电子邮箱
	age     int      // 私有字段：年龄
	Address *Address `json:"address"` // 用户地址信息
}

// Address 表示地址信息
type Address struct {
	Street  string  `json:"street"`  // 街道
	City    string  `json:"city"`    // 城市
	Country string  `json:"country"` // 国家
	ZipCode string  `json:"zipCode"` // 邮政编码
	Contact Contact `json:"contact"` // 联系信息
}

// Contact 表示联系人信息
type Contact struct {
	Phone   string `json:"phone"`   // 电话号码
	Mobile  string `json:"mobile"`  // 手机号码
	WeChat  string `json:"wechat"`  // 微信号
	Primary bool   `json:"primary"` // 是否为主要联系方式
}

type privateStruct struct {
	field string
}
'''


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep STRUCTDOC_* settings from the host out of tests."""
    for name in ("STRUCTDOC_DEBUG", "STRUCTDOC_LOG_FILE", "STRUCTDOC_TITLE", "STRUCTDOC_FIELD_TAG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_models_source() -> str:
    """Go source with the User/Address/Contact example structs."""
    return SAMPLE_MODELS_GO


@pytest.fixture
def sample_go_package(temp_dir: Path) -> Path:
    """Create a Go package directory with two source files."""
    pkg = temp_dir / "example"
    pkg.mkdir()
    (pkg / "models.go").write_text(SAMPLE_MODELS_GO, encoding="utf-8")
    (pkg / "order.go").write_text('''package example

import "time"

// Order is a purchase placed by a User.
type Order struct {
	ID       int64             `json:"id" db:"order_id"`
	Items    []LineItem        `json:"items"`
	Created  time.Time         `json:"created_at"`
	Metadata map[string]string `json:"metadata,omitempty"`
}

// LineItem is one product in an Order.
type LineItem struct {
	SKU      string `json:"sku"`
	Quantity int    `json:"qty"`
}
''', encoding="utf-8")
    return pkg
