from typing import Optional
from enum import Enum
from pydantic import BaseModel

class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

class SiteSettings(BaseModel):
    title: str
    subtitle: str
    titleAlign: TextAlign = TextAlign.CENTER
    subtitleAlign: TextAlign = TextAlign.CENTER
    copyright: str = ""
    aboutText: str = ""
    bannerImage: str = ""
    wechatQRCode: str = ""
    coffeeQRCode: str = ""

class SiteSettingsUpdate(BaseModel):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    titleAlign: Optional[TextAlign] = None
    subtitleAlign: Optional[TextAlign] = None
    copyright: Optional[str] = None
    aboutText: Optional[str] = None
    bannerImage: Optional[str] = None
    wechatQRCode: Optional[str] = None
    coffeeQRCode: Optional[str] = None


DEFAULT_SITE_SETTINGS = {
    "title": "AInovalife",
    "subtitle": "在代码与山水间，寻找内心的宁静与成长",
    "titleAlign": "center",
    "subtitleAlign": "center",
    "copyright": "Copyright © 2025 AInovalife. All rights reserved.",
    "aboutText": "一个融合科技洞察、个人成长与生活美学的个人博客空间。在这里，科技与人文交织，理性与感性共存。",
    "bannerImage": "https://images.unsplash.com/photo-1506905925346-21bda4d32df4?ixlib=rb-4.0.3&auto=format&fit=crop&w=2070&q=80",
    "wechatQRCode": "",
    "coffeeQRCode": "",
}
