import httpx
import sys

API_BASE = "http://localhost:8000/api/v1"

SAMPLE = {
    "school": "SMPN 3 Pangkalan Kerinci",
    "room": "Class 9A",
    "assessor": "OSIS",
    "answers": {
        "wallCracks": "Major",
        "ventilation": "Inadequate",
    },
    "photoRefs": [],
    "notes": "Diagonal crack above the door frame",
}

def run_assessment():
    print(f"Evaluating sample assessment for {SAMPLE['school']} / {SAMPLE['room']}...")
    try:
        # Live evaluation
        resp = httpx.post(f"{API_BASE}/assessments/evaluate", json={"answers": SAMPLE["answers"]}, timeout=10.0)
        resp.raise_for_status()
        result = resp.json()
        print(f"Score: {result['total']} -> {result['status']} ({result['status_description']})")
        for rec in result["recommendations"] or [result["fallback_message"]]:
            print(f"  - {rec}")

        # Save
        print("Saving to dashboard...")
        resp = httpx.post(f"{API_BASE}/assessments", json=SAMPLE, timeout=10.0)
        resp.raise_for_status()
        record = resp.json()
        print(f"Saved. Record ID: {record['id']}")

        # Dashboard
        resp = httpx.get(f"{API_BASE}/assessments", params={"status": "ALL"}, timeout=10.0)
        resp.raise_for_status()
        dashboard = resp.json()
        print(f"Dashboard counts: {dashboard['counts']}")
        for it in dashboard["records"]:
            print(f"  {it['createdAt']}  {it['school']:<28} {it['room']:<12} {it['total']:>3}  {it['status']}")

    except httpx.HTTPError as e:
        print(f"Error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    run_assessment()
