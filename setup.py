"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='logo-lang',
	version='0.1.0',
	packages=['logo', "logo.primitives", "logo.adapters", ],
	entry_points={
		'console_scripts': ["logo = logo.cmdline:main"],
	},
	license='MIT',
	description='A Logo interpreter with turtle graphics, in the manner of jslogo',
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
		"Environment :: Console",
	],
	python_requires='>=3.11',
	install_requires=[
		"booze-tools>=0.6.2.1",
		"pygame>=2.4.0",
	]
)
