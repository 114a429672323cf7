import json
import os
import tempfile
import webbrowser
from typing import Dict, Optional

from complexity_cli.analyzer.combiner import AnalysisResult
from complexity_cli.analyzer.lattice import sample_growth
from complexity_cli.core.config import DEFAULT_CHART_SAMPLES
from complexity_cli.core.logging import log_info, log_warning


class ComplexityVisualizer:
    """
    Renders the growth curves of an analysis result as an HTML/JavaScript chart.
    """

    def __init__(
        self,
        result: AnalysisResult,
        language: str,
        samples: int = DEFAULT_CHART_SAMPLES,
        source_name: Optional[str] = None,
    ):
        """
        Initialize the visualizer.

        Args:
            result: The classification to plot
            language: Dialect the code was analyzed as
            samples: Largest n to sample (n runs from 1)
            source_name: File name shown in the page header
        """
        self.result = result
        self.language = language
        self.samples = samples
        self.source_name = source_name or "<stdin>"

    def chart_data(self) -> Dict:
        """
        Sample both growth functions.

        Unrecognized labels (e.g. O(n^3), O(n!)) sample to zero.

        Returns:
            Dict with the n axis and one series per dimension
        """
        time_points = sample_growth(self.result.time, self.samples)
        space_points = sample_growth(self.result.space, self.samples)
        return {
            "n": [n for n, _ in time_points],
            "time": [value for _, value in time_points],
            "space": [value for _, value in space_points],
            "time_label": self.result.time.label,
            "space_label": self.result.space.label,
        }

    def generate_html(self, title: str = "Complexity Visualization") -> str:
        """
        Generate HTML for visualization.

        Args:
            title: Chart title

        Returns:
            HTML content as string
        """
        chart_json = json.dumps(self.chart_data())

        html_template = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 20px; }}
        .chart-container {{ position: relative; height: 400px; margin-bottom: 30px; }}
        .header {{ margin-bottom: 20px; }}
        .labels p {{ font-weight: bold; margin: 4px 0; }}
    </style>
</head>
<body>
    <div class="header">
        <h1>{title}</h1>
        <p>Source: {self.source_name} ({self.language})</p>
        <div class="labels">
            <p>Time Complexity: {self.result.time.label}</p>
            <p>Space Complexity: {self.result.space.label}</p>
        </div>
    </div>

    <div class="chart-container">
        <canvas id="complexityChart"></canvas>
    </div>

    <script>
        const chartData = {chart_json};

        document.addEventListener('DOMContentLoaded', function() {{
            const ctx = document.getElementById('complexityChart').getContext('2d');

            new Chart(ctx, {{
                type: 'line',
                data: {{
                    labels: chartData.n,
                    datasets: [
                        {{
                            label: `Time Complexity ${{chartData.time_label}}`,
                            data: chartData.time,
                            borderColor: 'rgba(136, 132, 216, 1.0)',
                            backgroundColor: 'rgba(136, 132, 216, 0.7)',
                            borderWidth: 2,
                            fill: false,
                            pointRadius: 0,
                            tension: 0.1
                        }},
                        {{
                            label: `Space Complexity ${{chartData.space_label}}`,
                            data: chartData.space,
                            borderColor: 'rgba(130, 202, 157, 1.0)',
                            backgroundColor: 'rgba(130, 202, 157, 0.7)',
                            borderWidth: 2,
                            fill: false,
                            pointRadius: 0,
                            tension: 0.1
                        }}
                    ]
                }},
                options: {{
                    responsive: true,
                    maintainAspectRatio: false,
                    scales: {{
                        y: {{
                            title: {{
                                display: true,
                                text: 'f(n)'
                            }},
                            beginAtZero: true
                        }},
                        x: {{
                            title: {{
                                display: true,
                                text: 'n'
                            }}
                        }}
                    }}
                }}
            }});
        }});
    </script>
</body>
</html>
"""
        return html_template

    def visualize(
        self, output_path: Optional[str] = None, open_browser: bool = True
    ) -> str:
        """
        Write the chart and optionally open it in the browser.

        Args:
            output_path: Path to save the HTML file (optional, uses temp file if None)
            open_browser: Open the page in the default browser

        Returns:
            Path to the generated HTML file
        """
        html_content = self.generate_html()

        if output_path:
            html_file = output_path
        else:
            fd, html_file = tempfile.mkstemp(suffix=".html", prefix="complexity_chart_")
            os.close(fd)

        with open(html_file, "w", encoding="utf-8") as f:
            f.write(html_content)

        if open_browser:
            try:
                webbrowser.open("file://" + os.path.abspath(html_file))
                log_info(f"Visualization opened in browser: {html_file}")
            except webbrowser.Error as e:
                log_warning(f"Failed to open browser: {e}")

        return html_file
