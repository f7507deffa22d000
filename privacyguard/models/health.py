"""
Health status data model.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any


@dataclass
class HealthStatus:
    """Health of the scanning components."""
    
    status: str  # "healthy", "unhealthy"
    components: Dict[str, str] = field(default_factory=dict)  # Component name -> status
    timestamp: datetime = None
    
    def is_healthy(self) -> bool:
        """Check if every component is healthy."""
        return self.status == "healthy"
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert health status to dictionary."""
        return {
            "status": self.status,
            "components": self.components,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
