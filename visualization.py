"""
TSP Annealing - Visualization Module
Plot tours and the progress of an annealing run.
"""

import matplotlib.pyplot as plt
from typing import List, Optional
from tsp_core import Tour


class TSPVisualizer:
    """Visualize TSP tours and annealing progress."""

    def __init__(self, figsize=(12, 8)):
        self.figsize = figsize

    def _finish(self, fig, save_path: Optional[str], show: bool, label: str):
        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=300, bbox_inches='tight')
            print(f"{label} saved to {save_path}")

        if show:
            plt.show()
        return fig

    def _draw_tour(self, ax, tour: Tour, city_size: int = 200, annotate: bool = True):
        x_coords = [city.x for city in tour.cities]
        y_coords = [city.y for city in tour.cities]

        # Close the loop
        x_coords.append(tour.cities[0].x)
        y_coords.append(tour.cities[0].y)

        ax.scatter(x_coords[:-1], y_coords[:-1],
                   c='red', s=city_size, zorder=3, edgecolors='darkred', linewidth=2)
        ax.plot(x_coords, y_coords, 'b-', linewidth=2, alpha=0.6, zorder=1)

        if annotate:
            for city in tour.cities:
                ax.annotate(city.name, (city.x, city.y),
                            xytext=(6, 6), textcoords='offset points', fontsize=9)

        # Highlight start city
        start_city = tour.cities[0]
        ax.scatter([start_city.x], [start_city.y],
                   c='green', s=city_size * 1.5, zorder=4,
                   marker='*', edgecolors='darkgreen', linewidth=2)

        ax.grid(True, alpha=0.3)
        ax.set_aspect('equal')

    def plot_tour(
        self,
        tour: Tour,
        title: str = "TSP Tour",
        show_arrows: bool = True,
        save_path: str = None,
        show: bool = True
    ):
        """
        Plot a single tour.

        Args:
            tour: The tour to visualize
            title: Plot title
            show_arrows: Show direction arrows on edges
            save_path: Optional path to save the figure
            show: Call plt.show() once the figure is drawn
        """
        fig, ax = plt.subplots(figsize=self.figsize)
        self._draw_tour(ax, tour)

        if show_arrows and len(tour.cities) > 1:
            for i in range(len(tour.cities)):
                start = tour.cities[i]
                end = tour.cities[(i + 1) % len(tour.cities)]

                mid_x = (start.x + end.x) / 2
                mid_y = (start.y + end.y) / 2
                dx = end.x - start.x
                dy = end.y - start.y

                ax.annotate('',
                            xy=(mid_x + dx * 0.1, mid_y + dy * 0.1),
                            xytext=(mid_x - dx * 0.1, mid_y - dy * 0.1),
                            arrowprops=dict(arrowstyle='->', color='blue', lw=2, alpha=0.7))

        distance = tour.get_total_distance()
        ax.set_title(f"{title}\nTotal Distance: {distance:.4f}",
                     fontsize=14, weight='bold')
        ax.set_xlabel('X Coordinate', fontsize=12)
        ax.set_ylabel('Y Coordinate', fontsize=12)

        return self._finish(fig, save_path, show, "Tour")

    def plot_comparison(
        self,
        tours: List[Tour],
        titles: List[str],
        save_path: str = None,
        show: bool = True
    ):
        """
        Plot multiple tours side by side, e.g. the initial and the best tour.
        """
        n_tours = len(tours)
        fig, axes = plt.subplots(1, n_tours, figsize=(6 * n_tours, 6))

        if n_tours == 1:
            axes = [axes]

        for ax, tour, title in zip(axes, tours, titles):
            self._draw_tour(ax, tour, city_size=150, annotate=False)
            ax.set_title(f"{title}\nDistance: {tour.get_total_distance():.4f}",
                         fontsize=12, weight='bold')

        return self._finish(fig, save_path, show, "Comparison")

    def plot_convergence(
        self,
        history: List[float],
        temperatures: Optional[List[float]] = None,
        title: str = "Annealing Progress",
        xlabel: str = "Iteration",
        ylabel: str = "Best Distance",
        save_path: str = None,
        show: bool = True
    ):
        """
        Plot the best distance over the run, with the temperature on a
        logarithmic second axis when given.
        """
        fig, ax = plt.subplots(figsize=(10, 6))

        iterations = range(len(history))
        ax.plot(iterations, history, 'b-', linewidth=2, label='Best Distance')

        initial = history[0]
        final = history[-1]
        improvement = ((initial - final) / initial) * 100 if initial else 0.0

        ax.axhline(y=final, color='g', linestyle='--',
                   linewidth=1.5, label=f'Final: {final:.4f}')
        ax.axhline(y=initial, color='r', linestyle='--',
                   linewidth=1.5, label=f'Initial: {initial:.4f}')

        if temperatures is not None:
            ax_t = ax.twinx()
            ax_t.plot(range(len(temperatures)), temperatures,
                      color='orange', linewidth=1, alpha=0.8, label='Temperature')
            ax_t.set_yscale('log')
            ax_t.set_ylabel('Temperature', fontsize=12)
            ax_t.legend(loc='lower left', fontsize=10)

        ax.set_xlabel(xlabel, fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(f"{title}\nImprovement: {improvement:.2f}%",
                     fontsize=14, weight='bold')
        ax.grid(True, alpha=0.3)
        ax.legend(loc='upper right', fontsize=10)

        return self._finish(fig, save_path, show, "Convergence plot")
