from pydantic import BaseModel, Field
from typing import Literal, Optional
class Engine(BaseModel):
    blend_minutes:int=Field(default=30, ge=1, le=120); refresh_ms:int=Field(default=60000, ge=1000)
    sub_minute:bool=False; blend_across_midnight:bool=False; palettes_file:Optional[str]='config/palettes.yaml'
class Render(BaseModel):
    center_x_pct:int=Field(default=35, ge=0, le=100); center_y_pct:int=Field(default=35, ge=0, le=100)
    glow_blur_px:int=Field(default=120, ge=0); glow_spread_px:int=Field(default=60, ge=0)
class UISettings(BaseModel): orb_size_px:int=Field(default=280, ge=40); fullscreen:bool=False
class LoggingSettings(BaseModel):
    enabled:bool=True; level:Literal['DEBUG','INFO','WARNING','ERROR','CRITICAL']='INFO'; file:Optional[str]=None
class AppConfig(BaseModel):
    engine:Engine=Field(default_factory=Engine); render:Render=Field(default_factory=Render)
    ui:UISettings=Field(default_factory=UISettings); logging:LoggingSettings=Field(default_factory=LoggingSettings)
