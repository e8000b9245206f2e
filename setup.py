from setuptools import setup

setup(
    name="nx-mst",
    version="0.1.0",
    description="Prim vs Kruskal minimum spanning forests with operation counts, plus a NetworkX backend",
    packages=["nx_mst"],
    python_requires=">=3.9",
    install_requires=[
        "networkx>=3.2",
        "numpy>=1.21",
        "scipy>=1.9",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "nx-mst = nx_mst.cli:main",
            "nx-mst-bench = nx_mst.benchmark:main",
        ],
        "networkx.backends": ["mst = nx_mst.backend:backend"],
        "networkx.backend_info": ["mst = nx_mst.backend:get_info"],
    },
)
