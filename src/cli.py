import argparse
import json
import sys
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from src.config import settings
from src.providers.youtube import YouTubeProvider
from src.services.transcript import TranscriptService

console = Console()

def render_transcript(body: dict, show_paragraphs: int = 3):
    transcript = body["transcript"]
    if not transcript["available"]:
        console.print(Panel(f"No transcript available for [bold]{body['videoId']}[/bold]", border_style="yellow"))
        return

    stats = transcript["stats"]
    table = Table(title=f"Transcript {body['videoId']} ({transcript['language']})", show_header=True, header_style="bold magenta")
    table.add_column("Words", style="cyan")
    table.add_column("Segments", style="cyan")
    table.add_column("Est. minutes", style="cyan")
    table.add_row(str(stats["words"]), str(stats["segments"]), str(stats["estimated_speaking_minutes"]))
    console.print(table)

    console.print(Panel(body["summary"]["content"] or "(no sentences long enough to summarize)", title="Summary", border_style="green"))

    paragraphs = transcript["text"]["paragraphs"]
    for p in paragraphs[:show_paragraphs]:
        console.print(f"  {p}\n")
    if len(paragraphs) > show_paragraphs:
        console.print(f"[dim]... {len(paragraphs) - show_paragraphs} more paragraphs (use --json for everything)[/dim]")

def main():
    parser = argparse.ArgumentParser(description="YouTube transcript + extractive summary")
    parser.add_argument("url", nargs="?", help="Video URL (youtu.be, watch?v= or /shorts/)")
    parser.add_argument("--video-id", help="11-character video id (takes precedence over URL)")
    parser.add_argument("--lang", help="Preferred caption language code (default: first listed)")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON response")
    parser.add_argument("--paragraphs", type=int, default=3, help="Number of paragraphs to preview")

    args = parser.parse_args()

    if not args.url and not args.video_id:
        parser.print_help()
        console.print("[red]Missing URL.[/red] Provide a URL or --video-id.")
        sys.exit(2)

    provider = YouTubeProvider(preferred_lang=args.lang or settings.TRANSCRIPT_LANG)
    service = TranscriptService(provider=provider)

    with console.status("Fetching transcript..."):
        status, body = service.handle(url=args.url, video_id=args.video_id)

    if args.json:
        console.print_json(json.dumps(body, ensure_ascii=False))
    elif body["success"]:
        render_transcript(body, show_paragraphs=args.paragraphs)
    else:
        console.print(f"[bold red]Error:[/bold red] {body['error']}")

    if status == 400:
        sys.exit(2)
    if status >= 500:
        sys.exit(1)

if __name__ == "__main__":
    main()
