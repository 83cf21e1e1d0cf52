"""In-memory food service."""
import yaml
from pathlib import Path
from typing import List, Optional
from app.services.catalog.base import ExtraDefinition, FoodService, MenuItem
from app.services.ordering.models import OrderSubmission


class InMemoryFoodService(FoodService):
    """In-memory food service using a YAML catalog."""

    def __init__(self, catalog_file: Optional[str] = None):
        """Initialize with optional catalog file path."""
        if catalog_file is None:
            catalog_file = Path(__file__).parent / "data" / "foods.yaml"
        self.catalog_file = Path(catalog_file)
        self._foods: Optional[List[MenuItem]] = None
        self.favorites: List[MenuItem] = []
        self.orders: List[OrderSubmission] = []

    def _load_foods(self) -> List[MenuItem]:
        """Load foods from YAML file."""
        if self._foods is None:
            if not self.catalog_file.exists():
                # Default catalog if file doesn't exist
                self._foods = [
                    MenuItem(
                        id=1,
                        name="Ao molho",
                        description="Macarrão ao molho branco, fughi e cheiro verde das montanhas.",
                        category=1,
                        price=19.9,
                        extras=[
                            ExtraDefinition(id=1, name="Bacon", value=1.5),
                            ExtraDefinition(id=2, name="Frango", value=2.0),
                        ],
                    ),
                    MenuItem(
                        id=2,
                        name="Veggie",
                        description="Macarrão com pimentão, ervilha e ervas finas colhidas no himalaia.",
                        category=1,
                        price=21.9,
                    ),
                ]
            else:
                with open(self.catalog_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                    self._foods = [
                        MenuItem(**food) for food in data.get("foods", [])
                    ]
        return self._foods

    async def fetch_items(self, item_id: int) -> List[MenuItem]:
        return [food for food in self._load_foods() if food.id == item_id]

    async def fetch_favorites(self) -> List[MenuItem]:
        return list(self.favorites)

    async def add_favorite(self, item: MenuItem) -> None:
        self.favorites = [fav for fav in self.favorites if fav.id != item.id]
        self.favorites.append(item)

    async def remove_favorite(self, item_id: int) -> None:
        self.favorites = [fav for fav in self.favorites if fav.id != item_id]

    async def submit_order(self, submission: OrderSubmission) -> None:
        self.orders.append(submission)
