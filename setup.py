import setuptools

setuptools.setup(
	name='tagparse',
	version='0.1.0',
	packages=[
		'tagparse',
		'tagparse.parsing',
		'tagparse.scanning',
		'tagparse.support',
	],
	python_requires='>=3.9',
	description='A parser for compact annotation strings of the form required,length(min=1, max=10)',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Libraries",
		"Development Status :: 3 - Alpha",
	],
)
