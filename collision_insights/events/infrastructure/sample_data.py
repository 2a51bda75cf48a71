"""
Synthetic collision events for demos and local development.
"""
import random
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from ..domain.defaults import DISTANCE_STATUSES, SEVERITIES

ROADS = {
    # Address : road type
    "Kampala Road, Kampala": "urban",
    "Entebbe Expressway": "highway",
    "Jinja Road, Mukono": "highway",
    "Masaka Road, Mpigi": "rural",
    "Bombo Road, Kawempe": "urban",
}

OBJECT_TYPES = {
    "vehicle": ["car", "truck", "bus", "motorcycle", "boda-boda"],
    "pedestrian": ["adult", "child"],
    "animal": ["cattle", "goat", "dog"],
    "unknown": [None],
}

WEATHER = ["clear", "rain", "fog", "overcast"]

def _object(rng: random.Random, index: int) -> Dict[str, Any]:
    obj_type = rng.choices(list(OBJECT_TYPES), weights=[70, 18, 8, 4])[0]
    return {
        "id": f"obj-{index}",
        "type": obj_type,
        "subType": rng.choice(OBJECT_TYPES[obj_type]),
        "confidence": round(rng.uniform(0.4, 0.99), 2),
        "position": {"x": rng.randint(0, 1280), "y": rng.randint(0, 720)},
        "speed": round(rng.uniform(0, 80), 1) if obj_type == "vehicle" else round(rng.uniform(0, 8), 1),
    }

def _distance(rng: random.Random, first: Dict, second: Dict) -> Dict[str, Any]:
    distance = round(rng.uniform(0.5, 25.0), 1)
    if distance < 3:
        status = DISTANCE_STATUSES[0]
    elif distance < 8:
        status = DISTANCE_STATUSES[1]
    else:
        status = DISTANCE_STATUSES[2]
    return {
        "objectId1": first["id"],
        "objectId2": second["id"],
        "distance": distance,
        "status": status,
    }

def generate_event(rng: random.Random, timestamp: datetime) -> Dict[str, Any]:
    """One event record in the store's camelCase layout, without an id."""
    address = rng.choice(list(ROADS))
    objects = [_object(rng, i) for i in range(rng.randint(1, 4))]
    distances = [
        _distance(rng, objects[i], objects[j])
        for i in range(len(objects))
        for j in range(i + 1, len(objects))
    ]
    return {
        "timestamp": timestamp.isoformat(),
        "severity": rng.choices(list(SEVERITIES), weights=[10, 20, 35, 35])[0],
        "location": {
            "address": address,
            "latitude": round(0.3476 + rng.uniform(-0.3, 0.3), 5),
            "longitude": round(32.5825 + rng.uniform(-0.3, 0.3), 5),
            "roadType": ROADS[address],
        },
        "objects": objects,
        "distances": distances,
        "weather": {
            "condition": rng.choice(WEATHER),
            "temperature": rng.randint(16, 32),
        },
    }

def generate_events(
    count: int,
    days: int = 30,
    now: Optional[datetime] = None,
    seed: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    ``count`` events spread over the last ``days`` days, oldest first.
    Rush hours are favoured like real traffic.
    """
    rng = random.Random(seed)
    now = now or datetime.now()
    events = []
    for _ in range(count):
        day = now - timedelta(days=rng.randint(0, max(days - 1, 0)))
        if rng.random() > 0.4:
            hour = rng.choice([7, 8, 9, 17, 18, 19, 20])
        else:
            hour = rng.randint(0, 23)
        timestamp = day.replace(hour=hour, minute=rng.randint(0, 59), second=rng.randint(0, 59), microsecond=0)
        if timestamp > now:
            timestamp -= timedelta(days=1)
        events.append(generate_event(rng, timestamp))
    events.sort(key=lambda e: e["timestamp"])
    return events
