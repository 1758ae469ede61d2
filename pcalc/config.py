"""runtime switches, assigned by the command line before a line is run
"""

# print every token the lexer produces
SHOULD_LOG_TOKENS = False
# print generated LLVM IR to stderr before it is executed
SHOULD_LOG_IR = False
# render the AST of each line to an html tree chart
DISPLAY_AST = False
# point the rendered chart at a local echarts.min.js instead of the CDN
LOCAL_ECHARTS = True
