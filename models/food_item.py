# models/food_item.py
from sqlalchemy import Column, Integer, String, Float
from core.db import Base

class FoodItem(Base):
    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String)  # Korean Bowls, Noodles, Drinks, ...
    price = Column(Float, nullable=False)
