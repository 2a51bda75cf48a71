import argparse
import os
import sys
from omegaconf import OmegaConf

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from collision_insights.common.config import ConfigManager
from collision_insights.events.application.builder import EventsApplicationBuilder
from collision_insights.events.infrastructure import generate_events

def main():
    parser = argparse.ArgumentParser(description="Write synthetic collision events into the configured store")
    parser.add_argument("--count", type=int, default=200, help="Number of events to generate")
    parser.add_argument("--days", type=int, default=30, help="Spread events over the last N days")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    parser.add_argument("--profile", default="default", help="Events config profile under conf/events")
    args = parser.parse_args()

    events_cfg = ConfigManager(config_dir="conf").load_events_config(args.profile)
    service = EventsApplicationBuilder(OmegaConf.create({"events": events_cfg})).build_service()

    print(f"Generating {args.count} synthetic collision events over {args.days} days...")
    for record in generate_events(args.count, days=args.days, seed=args.seed):
        service.add_event(record)

    stats = service.get_event_statistics("year")
    print(f"Done. Store now holds {stats.total} events from the last year.")

if __name__ == "__main__":
    main()
