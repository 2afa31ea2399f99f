"""Configuration for the route finder loader and command-line interface."""

from dataclasses import dataclass


@dataclass
class RouteFinderConfig:
    """Settings shared by the route-file loader and the CLI."""

    # Token separating source and target on an edge line
    edge_operator: str = "--"

    # Attribute name holding the edge weight inside ``[...]``
    weight_key: str = "weight"

    # Unit printed after route costs
    cost_unit: str = "hours"

    welcome_message: str = "Hi, welcome to Train Route Finder!"
    origin_prompt: str = "What station are you currently located at?"
    destination_prompt: str = "Which station would you like to go to?"
    unknown_station_message: str = "Error, please enter an available station."

    def trip_summary(self, cost: object) -> str:
        """Return the closing sentence printed after a route."""
        return (
            "Your trip following this route should take approximately "
            f"{cost} {self.cost_unit} to complete."
        )


# Global configuration instance
ROUTE_CONFIG = RouteFinderConfig()
