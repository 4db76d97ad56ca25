from git_frameworker.pipeline import main

main()
